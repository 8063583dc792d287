from helpentry import HelpEntryType

help_cmode = '''== Channel Modes ==

Oragono supports the following channel modes:

  +b  |  Client masks that are banned from the channel (e.g. *!*@127.0.0.1)
  +e  |  Client masks that are exempted from bans.
  +I  |  Client masks that are exempted from the invite-only flag.
  +i  |  Invite-only mode, only invited clients can join the channel.
  +k  |  Key required when joining the channel.
  +l  |  Client join limit for the channel.
  +m  |  Moderated mode, only privileged clients can talk on the channel.
  +n  |  No-outside-messages mode, only users that are on the channel can send
      |  messages to it.
  +r  |  Only registered users can talk in the channel.
  +s  |  Secret mode, channel won't show up in /LIST or whois replies.
  +t  |  Only channel opers can modify the topic.

= Prefixes =

  +q (~)  |  Founder channel mode.
  +a (&)  |  Admin channel mode.
  +o (@)  |  Operator channel mode.
  +h (%)  |  Halfop channel mode.
  +v (+)  |  Voice channel mode.'''

help_umode = '''== User Modes ==

Oragono supports the following user modes:

  +a  |  User is marked as being away. This mode is set with the /AWAY command.
  +i  |  User is marked as invisible (their channels are hidden from whois replies).
  +o  |  User is an IRC operator.
  +s  |  Server Notice Masks (see help with /HELPOP snomasks).
  +Z  |  User is connected via TLS.'''

help_snomask = '''== Server Notice Masks ==

Oragono supports the following server notice masks for operators:

  a  |  Local announcements.
  c  |  Local client connections.
  j  |  Local channel actions.
  k  |  Local kills.
  n  |  Local nick changes.
  o  |  Local oper actions.
  q  |  Local quits.
  t  |  Local /STATS usage.
  u  |  Local client account actions.
  x  |  Local X-lines (DLINE/KLINE/etc).

To set a snomask, do this with your nickname:

  /MODE <nick> +s <chars>

For instance, this would set the kill, oper, account and xline snomasks on dan:

  /MODE dan +s koux'''

help_helpop = '''{comm} <argument>

Get an explanation of <argument>, or "index" for a list of help topics.'''

help_chanserv = '''{comm} <subcommand> [params]

ChanServ controls channel registrations.'''

help_nickserv = '''{comm} <subcommand> [params]

NickServ controls accounts and user registrations.'''

help_npc = '''{comm} <target> <sourcenick> <text to be sent>
\t\t
The NPC command is used to send {what} to the target as the source.

Requires the roleplay mode (+E) to be set on the target.'''

help_scene = '''{comm} <target> <text to be sent>

The {comm} command is used to send a scene notification to the given target.'''

help_dline = '''DLINE [ANDKILL] [MYSELF] [duration] <ip>/<net> [ON <server>] [reason [| oper reason]]

Bans an IP address or network from connecting to the server. If the duration is
given then only for that long. The reason is shown to the user themselves, but
everyone else will see a standard message. The oper reason is shown to
operators getting info about the DLINEs that exist.

Bans are saved across subsequent launches of the server.

"ANDKILL" means that all matching clients are also removed from the server.

"MYSELF" is required when the DLINE matches the address the person applying it is connected
from. If "MYSELF" is not given, trying to DLINE yourself will result in an error.

[duration] can be of the following forms:
\t1y 12mo 31d 10h 8m 13s

<net> is specified in typical CIDR notation. For example:
\t127.0.0.1/8
\t8.8.8.8/24

ON <server> specifies that the ban is to be set on that specific server.

[reason] and [oper reason], if they exist, are separated by a vertical bar (|).'''

help_kline = '''KLINE [ANDKILL] [MYSELF] [duration] <mask> [ON <server>] [reason [| oper reason]]

Bans a mask from connecting to the server. If the duration is given then only for that
long. The reason is shown to the user themselves, but everyone else will see a standard
message. The oper reason is shown to operators getting info about the KLINEs that exist.

Bans are saved across subsequent launches of the server.

"ANDKILL" means that all matching clients are also removed from the server.

"MYSELF" is required when the KLINE matches the address the person applying it is connected
from. If "MYSELF" is not given, trying to KLINE yourself will result in an error.

[duration] can be of the following forms:
\t1y 12mo 31d 10h 8m 13s

<mask> is specified in typical IRC format. For example:
\tdan
\tdan!5*@127.*

ON <server> specifies that the ban is to be set on that specific server.

[reason] and [oper reason], if they exist, are separated by a vertical bar (|).'''

help_monitor = '''MONITOR <subcmd>

Allows the monitoring of nicknames, for alerts when they are online and
offline. The subcommands are:

    MONITOR + target{,target}
Adds the given names to your list of monitored nicknames.

    MONITOR - target{,target}
Removes the given names from your list of monitored nicknames.

    MONITOR C
Clears your list of monitored nicknames.

    MONITOR L
Lists all the nicknames you are currently monitoring.

    MONITOR S
Lists whether each nick in your MONITOR list is online or offline.'''

help_debug = '''DEBUG <option>

Prints debug information about the IRCd. <option> can be one of:

* GCSTATS: Garbage control statistics.
* NUMGOROUTINE: Number of goroutines in use.
* STARTCPUPROFILE: Starts the CPU profiler.
* STOPCPUPROFILE: Stops the CPU profiler.
* PROFILEHEAP: Writes out the CPU profiler info.'''

help_prefix = '''RPL_ISUPPORT PREFIX

Oragono supports the following channel membership prefixes:

  +q (~)  |  Founder channel mode.
  +a (&)  |  Admin channel mode.
  +o (@)  |  Operator channel mode.
  +h (%)  |  Halfop channel mode.
  +v (+)  |  Voice channel mode.'''

help_casemapping = '''RPL_ISUPPORT CASEMAPPING

Oragono supports an experimental unicode casemapping designed for extended
Unicode support. This casemapping is based off RFC 7613 and the draft rfc7613
casemapping spec here: http://oragono.io/specs.html'''

# Every topic the server knows about. Keys are lowercase topic names. 'str' is
# required, the rest default to a non-oper, non-alias COMMAND entry.
help_ = {
    # Commands
    'acc': {
        'str': '''ACC REGISTER <accountname> [callback_namespace:]<callback> [cred_type] :<credential>
ACC VERIFY <accountname> <auth_code>

Used in account registration. See the relevant specs for more info:
http://oragono.io/specs.html''',
    },
    'ambiance': {
        'str': help_scene.format(comm='AMBIANCE'),
    },
    'authenticate': {
        'str': '''AUTHENTICATE

Used during SASL authentication. See the IRCv3 specs for more info:
http://ircv3.net/specs/extensions/sasl-3.1.html''',
    },
    'away': {
        'str': '''AWAY [message]

If [message] is sent, marks you away. If [message] is not sent, marks you no
longer away.''',
    },
    'cap': {
        'str': '''CAP <subcommand> [:<capabilities>]

Used in capability negotiation. See the IRCv3 specs for more info:
http://ircv3.net/specs/core/capability-negotiation-3.1.html
http://ircv3.net/specs/core/capability-negotiation-3.2.html''',
    },
    'chanserv': {
        'str': help_chanserv.format(comm='CHANSERV'),
    },
    'cs': {
        'str': help_chanserv.format(comm='CS'),
    },
    'debug': {
        'str': help_debug,
        'oper': True,
    },
    'dline': {
        'str': help_dline,
        'oper': True,
    },
    'help': {
        'str': help_helpop.format(comm='HELP'),
    },
    'helpop': {
        'str': help_helpop.format(comm='HELPOP'),
    },
    'invite': {
        'str': '''INVITE <nickname> <channel>

Invites the given user to the given channel, so long as you have the
appropriate channel privs.''',
    },
    'ison': {
        'str': '''ISON <nickname>{ <nickname>}

Returns whether the given nicks exist on the network.''',
    },
    'join': {
        'str': '''JOIN <channel>{,<channel>} [<key>{,<key>}]

Joins the given channels with the matching keys.''',
    },
    'kick': {
        'str': '''KICK <channel> <user> [reason]

Removes the user from the given channel, so long as you have the appropriate
channel privs.''',
    },
    'kill': {
        'str': '''KILL <nickname> [reason]

Removes the given user from the network, showing them the reason if it is
supplied.''',
        'oper': True,
    },
    'kline': {
        'str': help_kline,
        'oper': True,
    },
    'list': {
        # TODO: explain <elistcond>s once the server supports any
        'str': '''LIST [<channel>{,<channel>}] [<elistcond>{,<elistcond>}]

Shows information on the given channels (or if none are given, then on all
channels). <elistcond>s modify how the channels are selected.''',
    },
    'lusers': {
        'str': '''LUSERS [<mask> [<server>]]

Shows statistics about the size of the network. If <mask> is given, only
returns stats for servers matching the given mask.  If <server> is given, the
command is processed by that server.''',
    },
    'mode': {
        'str': '''MODE <target> [<modestring> [<mode arguments>...]]

Sets and removes modes from the given target. For more specific information on
mode characters, see the help for "modes".''',
    },
    'monitor': {
        'str': help_monitor,
    },
    'motd': {
        'str': '''MOTD [server]

Returns the message of the day for this, or the given, server.''',
    },
    'names': {
        'str': '''NAMES [<channel>{,<channel>}]

Views the clients joined to a channel and their channel membership prefixes. To
view the channel membership prefixes supported by this server, see the help for
"PREFIX".''',
    },
    'nick': {
        'str': '''NICK <newnick>

Sets your nickname to the new given one.''',
    },
    'nickserv': {
        'str': help_nickserv.format(comm='NICKSERV'),
    },
    'notice': {
        'str': '''NOTICE <target>{,<target>} <text to be sent>

Sends the text to the given targets as a NOTICE.''',
    },
    'npc': {
        'str': help_npc.format(comm='NPC', what='a message'),
    },
    'npca': {
        'str': help_npc.format(comm='NPCA', what='an action'),
    },
    'ns': {
        'str': help_nickserv.format(comm='NS'),
    },
    'oper': {
        'str': '''OPER <name> <password>

If the correct details are given, gives you IRCop privs.''',
    },
    'part': {
        'str': '''PART <channel>{,<channel>} [reason]

Leaves the given channels and shows people the given reason.''',
    },
    'pass': {
        'str': '''PASS <password>

When the server requires a connection password to join, used to send us the
password.''',
    },
    'ping': {
        'str': '''PING <args>...

Requests a PONG. Used to check link connectivity.''',
    },
    'pong': {
        'str': '''PONG <args>...

Replies to a PING. Used to check link connectivity.''',
    },
    'privmsg': {
        'str': '''PRIVMSG <target>{,<target>} <text to be sent>

Sends the text to the given targets as a PRIVMSG.''',
    },
    'quit': {
        'str': '''QUIT [reason]

Indicates that you're leaving the server, and shows everyone the given reason.''',
    },
    'rehash': {
        'str': '''REHASH

Reloads the config file and updates TLS certificates on listeners''',
        'oper': True,
    },
    'rename': {
        'str': '''RENAME <channel> <newname> [<reason>]

Renames the given channel with the given reason, if possible.

For example:
\tRENAME #ircv2 #ircv3 :Protocol upgrades!''',
    },
    'sanick': {
        'str': '''SANICK <currentnick> <newnick>

Gives the given user a new nickname.''',
        'oper': True,
    },
    'samode': {
        'str': '''SAMODE <target> [<modestring> [<mode arguments>...]]

Forcibly sets and removes modes from the given target -- only available to
opers. For more specific information on mode characters, see the help for
"cmode" and "umode".''',
        'oper': True,
    },
    'scene': {
        'str': help_scene.format(comm='SCENE'),
    },
    'tagmsg': {
        'str': '''@+client-only-tags TAGMSG <target>{,<target>}

Sends the given client-only tags to the given targets as a TAGMSG. See the IRCv3
specs for more info: http://ircv3.net/specs/core/message-tags-3.3.html''',
    },
    'time': {
        'str': '''TIME [server]

Shows the time of the current, or the given, server.''',
    },
    'topic': {
        'str': '''TOPIC <channel> [topic]

If [topic] is given, sets the topic in the channel to that. If [topic] is not
given, views the current topic on the channel.''',
    },
    'undline': {
        'str': '''UNDLINE <ip>/<net>

Removes an existing ban on an IP address or a network.

<net> is specified in typical CIDR notation. For example:
\t127.0.0.1/8
\t8.8.8.8/24''',
        'oper': True,
    },
    'unkline': {
        'str': '''UNKLINE <mask>

Removes an existing ban on a mask.

For example:
\tdan
\tdan!5*@127.*''',
        'oper': True,
    },
    'user': {
        'str': '''USER <username> 0 * <realname>

Used in connection registration, sets your username and realname to the given
values (though your username may also be looked up with Ident).''',
    },
    'userhost': {
        'str': '''USERHOST <nickname>{ <nickname>}
\t\t
Shows information about the given users. Takes up to 10 nicknames.''',
    },
    'version': {
        'str': '''VERSION [server]

Views the version of software and the RPL_ISUPPORT tokens for the given server.''',
    },
    'who': {
        'str': '''WHO <name> [o]

Returns information for the given user.''',
    },
    'whois': {
        'str': '''WHOIS <client>{,<client>}

Returns information for the given user(s).''',
    },
    'whowas': {
        'str': '''WHOWAS <nickname>

Returns historical information on the last user with the given nickname.''',
    },

    # Informational
    'modes': {
        'str': help_cmode + '\n\n' + help_umode,
        'type': HelpEntryType.INFORMATION,
    },
    'cmode': {
        'str': help_cmode,
        'type': HelpEntryType.INFORMATION,
    },
    'cmodes': {
        'str': help_cmode,
        'type': HelpEntryType.INFORMATION,
        'alias': True,
    },
    'umode': {
        'str': help_umode,
        'type': HelpEntryType.INFORMATION,
    },
    'umodes': {
        'str': help_umode,
        'type': HelpEntryType.INFORMATION,
        'alias': True,
    },
    'snomask': {
        'str': help_snomask,
        'type': HelpEntryType.INFORMATION,
        'oper': True,
        'alias': True,
    },
    'snomasks': {
        'str': help_snomask,
        'type': HelpEntryType.INFORMATION,
        'oper': True,
    },

    # RPL_ISUPPORT
    'casemapping': {
        'str': help_casemapping,
        'type': HelpEntryType.ISUPPORT,
    },
    'prefix': {
        'str': help_prefix,
        'type': HelpEntryType.ISUPPORT,
    },
}

# pylama:ignore=E501
