from pbthread import PBThread
from queue import Empty, Queue


class OutboundMessageThread(PBThread):
    ''' If the server is going to send a reply line to a client, it must do
    so through this class.

    Use the add() function to add an outbound line for a client. For example,
    to send client 'pastly' the end of a help reply:

    >>> omt = outbound_message_thread
    >>> omt.add(client, ':irc.example.net 706 pastly AWAY :End of help')

    Lines are written in exactly the order they were added. A help reply is
    added by one thread in one go, so its lines are never reordered.
    '''

    def __init__(self, global_state, long_timeout=5):
        PBThread.__init__(self, self._enter, name='OutboundMessage')
        self._message_queue = Queue()
        self._long_timeout = long_timeout
        self.update_global_state(global_state)

    def update_global_state(self, gs):
        self._log = gs['log']
        self._end_event = gs['events']['kill_outmessage']
        if self._log:
            self._log.info('OutboundMessageThread updated state')

    def _enter(self):
        log = self._log
        log.info('Started OutboundMessageThread instance')
        while not self._end_event.is_set():
            try:
                client, line = self._message_queue.get(
                    timeout=self._long_timeout)
            except Empty:
                continue
            self._write(client, line)
        self._shutdown()

    def _write(self, client, line):
        try:
            client.write_line(line)
        except (OSError, ValueError) as e:
            # the connection is gone or closed. Nothing to retry.
            self._log.warn('Can\'t send to', client.nick, 'so dropping line:',
                           e)

    def _shutdown(self):
        log = self._log
        # whatever was queued before we were told to stop still goes out
        while True:
            try:
                client, line = self._message_queue.get_nowait()
            except Empty:
                break
            self._write(client, line)
        log.info('OutboundMessageThread going away')

    def add(self, client, line):
        self._message_queue.put((client, line))
