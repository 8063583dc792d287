"""
Tests for wiring the help subsystem together in main.
"""

import io
from configparser import ConfigParser
from threading import Event

import main
from helpresolver import HelpResolver
from outboundmessagethread import OutboundMessageThread


def _gs(recording_log, conf_text=""):
    conf = ConfigParser()
    conf.read_string(conf_text)
    return {
        "threads": {"help_queries": {}, "out_message": None},
        "events": {
            "kill_help_queries": Event(),
            "kill_outmessage": Event(),
        },
        "help": {"registry": None, "index": None, "resolver": None},
        "clients": {},
        "conf": conf,
        "log": recording_log,
    }


def test_create_help_builds_shared_objects(recording_log):
    gs = main.create_help(_gs(recording_log))
    assert isinstance(gs["help"]["resolver"], HelpResolver)
    assert gs["help"]["registry"].lookup("away") is not None
    assert "   away" in gs["help"]["index"].get(False)


def test_console_session_end_to_end(recording_log):
    """HELP lines typed at the console are answered; others are ignored."""
    gs = main.create_help(
        _gs(recording_log, "[general]\nserver_name = irc.example.net\n"))
    gs["threads"]["out_message"] = OutboundMessageThread(gs, long_timeout=0.1)
    out = io.StringIO()
    client = main.create_client(gs, "dan", False, out)
    gs["threads"]["out_message"].start()
    gs["threads"]["help_queries"]["dan"].start()

    assert main.proc_console_line(gs, client, "HELPOP kill\n")
    assert main.proc_console_line(gs, client, "help   Away\n")
    assert not main.proc_console_line(gs, client, "PRIVMSG #foo :hi\n")
    assert not main.proc_console_line(gs, client, "   \n")
    main.destroy_threads(gs)

    lines = out.getvalue().split("\r\n")[:-1]
    assert lines[0] == ":irc.example.net 524 dan kill :Help not found"
    assert lines[1] == ":irc.example.net 704 dan AWAY :AWAY [message]"
    assert lines[-1] == ":irc.example.net 706 dan AWAY :End of help"
    assert any("PRIVMSG" in msg for level, msg in recording_log.lines)
