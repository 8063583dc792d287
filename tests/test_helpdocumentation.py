"""
Unit tests for the help registry and help index.
"""

import threading

import pytest

import helptopics
from helpdocumentation import (
    HelpDataError,
    HelpIndex,
    HelpRegistry,
    _make_entry,
    generate_help_index,
)
from helpentry import HelpEntryType, is_visible


def _section(index_text, heading):
    """Return the topic names listed under one heading of an index."""
    lines = index_text.split("\n")
    start = lines.index(heading) + 1
    names = []
    for line in lines[start:]:
        if not line.startswith("   "):
            break
        names.append(line.strip())
    return names


def _all_names(index_text):
    return (
        _section(index_text, "Commands:")
        + _section(index_text, "RPL_ISUPPORT Tokens:")
        + _section(index_text, "Information:")
    )


def test_registry_loads_every_topic(registry):
    """Every literal topic ends up in the registry."""
    assert len(registry) == len(helptopics.help_)
    assert registry.names() == sorted(helptopics.help_)


def test_lookup_ignores_case(registry):
    """Lookups are case-insensitive."""
    assert registry.lookup("AWAY") is registry.lookup("away")
    assert registry.lookup("Away").name == "away"
    assert "KILL" in registry


def test_lookup_missing_topic(registry):
    """Unknown names and non-strings give None."""
    assert registry.lookup("nosuchtopic") is None
    assert registry.lookup(None) is None
    assert "nosuchtopic" not in registry


def test_entry_fields(registry):
    """Entries carry their type, oper and alias flags."""
    kill = registry.lookup("kill")
    assert kill.oper is True
    assert kill.alias is False
    assert kill.type == HelpEntryType.COMMAND

    cmodes = registry.lookup("cmodes")
    assert cmodes.alias is True
    assert cmodes.type == HelpEntryType.INFORMATION

    prefix = registry.lookup("prefix")
    assert prefix.type == HelpEntryType.ISUPPORT


def test_registry_is_read_only(registry):
    """Neither the mapping nor its entries can be changed."""
    with pytest.raises(TypeError):
        registry.entries["away"] = registry.lookup("kill")
    with pytest.raises(AttributeError):
        registry.lookup("away").text = "changed"


def test_registry_iterates_in_name_order(small_registry):
    """Iteration order does not depend on dict order."""
    names = [e.name for e in small_registry]
    assert names == sorted(names)


def test_uppercase_names_are_stored_lowercase():
    """Topic names are canonicalized to lowercase."""
    registry = HelpRegistry({"Shout": {"str": "SHOUT"}})
    assert registry.names() == ["shout"]
    assert registry.lookup("SHOUT").text == "SHOUT"


def test_case_collision_is_rejected():
    """Two names that only differ in case are a data error."""
    with pytest.raises(HelpDataError):
        HelpRegistry({"shout": {"str": "a"}, "SHOUT": {"str": "b"}})


@pytest.mark.parametrize(
    "topics",
    [
        {"": {"str": "empty name"}},
        {" padded ": {"str": "padded name"}},
        {"notext": {}},
        {"emptytext": {"str": ""}},
        {"badtype": {"str": "x", "type": "command"}},
        {"badkey": {"str": "x", "subs": None}},
        {"notadict": "just a string"},
    ],
)
def test_malformed_topics_are_rejected(topics):
    """Malformed help data stops the registry from being built."""
    with pytest.raises(HelpDataError):
        HelpRegistry(topics)


def test_defaults_for_optional_keys():
    """Missing type/oper/alias default to a plain command."""
    entry = HelpRegistry({"plain": {"str": "PLAIN"}}).lookup("plain")
    assert entry.type == HelpEntryType.COMMAND
    assert entry.oper is False
    assert entry.alias is False


def test_alias_mismatch_only_warns(recording_log):
    """An alias whose text matches nothing is logged, not rejected."""
    registry = HelpRegistry(
        {
            "real": {"str": "REAL"},
            "fake": {"str": "SOMETHING ELSE", "alias": True},
        },
        log=recording_log,
    )
    assert registry.lookup("fake").text == "SOMETHING ELSE"
    warnings = [msg for level, msg in recording_log.lines if level == "warn"]
    assert len(warnings) == 1
    assert "fake" in warnings[0]


def test_shipped_aliases_match_canonical_text(registry):
    """Every alias we ship repeats the text of a non-alias topic."""
    canonical = set(e.text for e in registry if not e.alias)
    for entry in registry:
        if entry.alias:
            assert entry.text in canonical, entry.name


def test_is_visible():
    """Oper topics are only visible to opers."""
    registry = HelpRegistry({"a": {"str": "A"}, "b": {"str": "B", "oper": True}})
    assert is_visible(registry.lookup("a"), False)
    assert is_visible(registry.lookup("a"), True)
    assert not is_visible(registry.lookup("b"), False)
    assert is_visible(registry.lookup("b"), True)


def test_small_index_layout(small_registry):
    """The index lists each visible, non-alias topic in its section."""
    index = generate_help_index(small_registry, False)
    assert index == (
        "= Help Topics =\n"
        "\n"
        "Commands:\n"
        "   alpha\n"
        "   zeta\n"
        "\n"
        "RPL_ISUPPORT Tokens:\n"
        "   network\n"
        "\n"
        "Information:\n"
        "   colours"
    )


def test_small_oper_index(small_registry):
    """The oper index adds oper topics but still no aliases."""
    index = generate_help_index(small_registry, True)
    assert _section(index, "Commands:") == ["alpha", "smite", "zeta"]
    assert "colors" not in _all_names(index)


def test_general_index_contents(registry):
    """Every plain topic appears exactly once, in the right sorted section."""
    index = generate_help_index(registry, False)
    headings = {
        HelpEntryType.COMMAND: "Commands:",
        HelpEntryType.ISUPPORT: "RPL_ISUPPORT Tokens:",
        HelpEntryType.INFORMATION: "Information:",
    }
    names = _all_names(index)
    for entry in registry:
        if entry.alias or entry.oper:
            assert entry.name not in names
        else:
            assert names.count(entry.name) == 1
            assert entry.name in _section(index, headings[entry.type])
    for heading in headings.values():
        section = _section(index, heading)
        assert section == sorted(section)


def test_index_hides_oper_topics_and_aliases(registry):
    """kill is oper-only and cmodes/umodes are aliases."""
    index = generate_help_index(registry, False)
    commands = _section(index, "Commands:")
    assert "kill" not in commands
    assert "away" in commands
    information = _section(index, "Information:")
    assert "cmode" in information
    assert "cmodes" not in information
    assert "umodes" not in information


def test_oper_index_is_strict_superset(registry):
    """Opers see everything regular users see, and more."""
    general = set(_all_names(generate_help_index(registry, False)))
    oper = set(_all_names(generate_help_index(registry, True)))
    assert general < oper
    assert "kill" in oper
    assert "snomasks" in oper
    assert "snomask" not in oper
    assert "cmodes" not in oper


def test_index_is_deterministic(registry):
    """Building the index twice gives identical text."""
    assert generate_help_index(registry, True) == generate_help_index(registry, True)


def test_help_index_cache(registry):
    """HelpIndex hands back the same text as generate_help_index."""
    index = HelpIndex(registry)
    assert index.get(False) == generate_help_index(registry, False)
    assert index.get(True) == generate_help_index(registry, True)
    assert index.get(False) is index.get(False)
    assert index.get(False) != index.get(True)


def test_help_index_cache_from_many_threads(registry):
    """Concurrent first reads all see the same index."""
    index = HelpIndex(registry)
    results = []
    lock = threading.Lock()

    def read():
        value = index.get(True)
        with lock:
            results.append(value)

    threads = [threading.Thread(target=read) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(results) == 8
    assert len(set(results)) == 1


def test_make_entry_builds_one_entry():
    """Entries can be built and checked one at a time."""
    entry = _make_entry("Ping", {"str": "PING", "oper": 1})
    assert entry.name == "ping"
    assert entry.oper is True
    with pytest.raises(HelpDataError):
        _make_entry("ping", {"str": "PING", "subs": None})
