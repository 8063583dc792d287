from threading import Lock
from types import MappingProxyType
from helpentry import HelpEntry, HelpEntryType, is_visible
import helptopics


class HelpDataError(Exception):
    ''' The literal help data is malformed. Raised while building a
    HelpRegistry, so the server never starts with bad help topics. '''
    pass


valid_keys = ['str', 'type', 'oper', 'alias']


def _make_entry(name, info):
    if not isinstance(name, str) or not len(name.strip()):
        raise HelpDataError('Bad help topic name {!r}'.format(name))
    if name != name.strip():
        raise HelpDataError(
            'Help topic name {!r} has surrounding whitespace'.format(name))
    if not isinstance(info, dict):
        raise HelpDataError('Help topic {} is not a dict'.format(name))
    unknown = [k for k in info if k not in valid_keys]
    if len(unknown):
        raise HelpDataError('Help topic {} has unknown keys: {}'.format(
            name, ', '.join(sorted(unknown))))
    text = info.get('str')
    if not isinstance(text, str) or not len(text):
        raise HelpDataError('Help topic {} has no text'.format(name))
    type_ = info.get('type', HelpEntryType.COMMAND)
    if not isinstance(type_, HelpEntryType):
        raise HelpDataError('Help topic {} has bad type {!r}'.format(
            name, type_))
    return HelpEntry(name=name.lower(), text=text, type=type_,
                     oper=bool(info.get('oper', False)),
                     alias=bool(info.get('alias', False)))


class HelpRegistry:
    ''' Read-only mapping of lowercase topic name to HelpEntry.

    Built once from a dict shaped like helptopics.help_ and never changed
    afterwards, so any number of threads may read it without locking.

    >>> registry = HelpRegistry(helptopics.help_)
    >>> registry.lookup('AWAY').text.split('\\n')[0]
    'AWAY [message]'
    '''
    def __init__(self, topics, log=None):
        self._log = log
        entries = {}
        for name in topics:
            entry = _make_entry(name, topics[name])
            if entry.name in entries:
                raise HelpDataError(
                    'Help topic {} is defined more than once'.format(name))
            entries[entry.name] = entry
        self._entries = MappingProxyType(entries)
        self._check_aliases()
        if self._log:
            self._log.info('Loaded', len(self._entries), 'help topics')

    def _check_aliases(self):
        # An alias is supposed to repeat the text of a real entry. Nothing
        # breaks if it doesn't, so only complain about it.
        canonical_texts = set(
            e.text for e in self._entries.values() if not e.alias)
        for entry in self:
            if entry.alias and entry.text not in canonical_texts:
                if self._log:
                    self._log.warn('Help alias', entry.name, 'does not match '
                                   'the text of any other help topic')

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        for name in sorted(self._entries):
            yield self._entries[name]

    def __contains__(self, name):
        return self.lookup(name) is not None

    def names(self):
        return sorted(self._entries)

    def lookup(self, name):
        ''' Returns the HelpEntry for name, ignoring case, or None '''
        if not isinstance(name, str):
            return None
        return self._entries.get(name.lower())

    @property
    def entries(self):
        return self._entries


help_index_template = '''= Help Topics =

Commands:
{commands}

RPL_ISUPPORT Tokens:
{isupport}

Information:
{information}'''


def generate_help_index(registry, for_opers):
    ''' Build the text of the help index. Aliases are never listed, and oper
    topics only are when for_opers is True. Each section is sorted. '''
    sections = {
        HelpEntryType.COMMAND: [],
        HelpEntryType.ISUPPORT: [],
        HelpEntryType.INFORMATION: [],
    }
    for entry in registry:
        if entry.alias:
            continue
        if not is_visible(entry, for_opers):
            continue
        sections[entry.type].append('   {}'.format(entry.name))
    for type_ in sections:
        sections[type_].sort()
    return help_index_template.format(
        commands='\n'.join(sections[HelpEntryType.COMMAND]),
        isupport='\n'.join(sections[HelpEntryType.ISUPPORT]),
        information='\n'.join(sections[HelpEntryType.INFORMATION]))


class HelpIndex:
    ''' Remembers both versions of the help index the first time each is
    asked for. The registry can't change, so computing it once is enough. '''
    def __init__(self, registry):
        self._registry = registry
        self._indexes = {}
        self._mutex = Lock()

    def get(self, for_opers):
        for_opers = bool(for_opers)
        with self._mutex:
            if for_opers not in self._indexes:
                self._indexes[for_opers] = \
                    generate_help_index(self._registry, for_opers)
            return self._indexes[for_opers]


def default_registry(log=None):
    return HelpRegistry(helptopics.help_, log=log)
