from pbthread import PBThread
from queue import Empty, Queue


class HelpQueryThread(PBThread):
    ''' Answers one client's HELP/HELPOP queries, one at a time.

    The connection handler calls recv_query() with the params of each query
    it has already parsed. This thread hands them to the shared HelpResolver,
    which sends the reply lines to the client. '''
    def __init__(self, global_state, client):
        PBThread.__init__(self, self._enter,
                          name='HelpQuery-{}'.format(client.nick))
        self._client = client
        self._query_queue = Queue(100)
        self.update_global_state(global_state)

    def update_global_state(self, gs):
        self._log = gs['log']
        self._resolver = gs['help']['resolver']
        self._server_name = gs['conf'].get(
            'general', 'server_name', fallback='localhost')
        self._end_event = gs['events']['kill_help_queries']
        if self._log:
            self._log.info('HelpQueryThread', self._client.nick,
                           'updated state')

    def _enter(self):
        log = self._log
        log.info('Started HelpQueryThread', self._client.nick, 'instance')
        while not self._end_event.is_set():
            try:
                params = self._query_queue.get(timeout=1)
            except Empty:
                continue
            self._proc_help_query(params)
        return self._shutdown()

    def _proc_help_query(self, params):
        self._resolver.handle(self._client, params, self._server_name)

    def _shutdown(self):
        log = self._log
        # answer anything the client asked before we were told to stop
        while True:
            try:
                params = self._query_queue.get_nowait()
            except Empty:
                break
            self._proc_help_query(params)
        log.info('HelpQueryThread', self._client.nick, 'going away')

    def recv_query(self, params):
        self._query_queue.put(list(params))
