from threading import Lock


def format_reply(source, numeric, nick, args):
    ''' Build one reply line. The last arg is always sent as the trailing
    parameter since help text can contain spaces or be empty. Any other arg
    that couldn't survive the trip as a single middle parameter raises
    ValueError rather than turning into different params on the client. '''
    words = [':{}'.format(source), numeric, nick]
    if len(args):
        for arg in args[:-1]:
            if not len(arg) or ' ' in arg or arg.startswith(':'):
                raise ValueError(
                    'Bad middle parameter {!r} in {} reply'.format(
                        arg, numeric))
        words.extend(args[:-1])
        words.append(':{}'.format(args[-1]))
    return ' '.join(words)


class Client:
    ''' The parts of a connected client the help code cares about: who they
    are, whether they're an IRC operator, and where their replies go.

    Replies are handed to an OutboundMessageThread when one is attached,
    otherwise they're written to wfile right away. '''
    def __init__(self, nick, is_operator=False, wfile=None,
                 out_msg_thread=None, log=None):
        self.nick = nick
        self.is_operator = is_operator
        self._wfile = wfile
        self._wfile_mutex = Lock()
        self._out_msg_thread = out_msg_thread
        self._log = log

    def __str__(self):
        return '{}{}'.format(self.nick, ' (oper)' if self.is_operator else '')

    def set(self, nick=None, is_operator=None):
        if nick:
            self.nick = nick
        if is_operator is not None:
            self.is_operator = is_operator

    def send(self, source, numeric, args):
        try:
            line = format_reply(source, numeric, self.nick, args)
        except ValueError as e:
            # can't be sent as asked, and a mangled line is worse than none
            if self._log:
                self._log.warn('Not sending reply to', self.nick, 'so '
                               'dropping line:', e)
            return
        omt = self._out_msg_thread
        if omt:
            omt.add(self, line)
        else:
            self.write_line(line)

    def write_line(self, line):
        ''' Do not call this directly when an OutboundMessageThread is
        attached; it calls this for you, in order. '''
        if self._wfile is None:
            return
        with self._wfile_mutex:
            self._wfile.write('{}\r\n'.format(line))
            self._wfile.flush()
