from collections import namedtuple
from helpdocumentation import HelpIndex
from helpentry import is_visible
from helpreplies import frame_help, not_found_reply, send_lines

usage_label = 'HELPOP'
usage_text = '''HELPOP <argument>

Get an explanation of <argument>, or "index" for a list of help topics.'''

index_label = 'HELP'
index_query = 'index'


class HelpReply(namedtuple('HelpReply', ['label', 'text'])):
    ''' A successful answer: some help text to send under label '''
    def lines(self):
        return frame_help(self.label, self.text)


class HelpNotFound(namedtuple('HelpNotFound', ['params'])):
    ''' The topic doesn't exist, or the client isn't allowed to see it. On
    purpose there is no way to tell which. '''
    def lines(self):
        return [not_found_reply(self.params)]


class HelpResolver:
    ''' Answers HELP and HELPOP queries.

    resolve() works out what the answer is and has no side effects. handle()
    also sends that answer to the client. Neither keeps any state between
    calls, so one HelpResolver can be shared by every connection. '''
    def __init__(self, registry, index=None, log=None):
        self._registry = registry
        self._index = index if index is not None else HelpIndex(registry)
        self._log = log

    def resolve(self, params, is_operator):
        params = list(params)
        query = ' '.join(params).strip().lower()
        if not len(query):
            return HelpReply(usage_label, usage_text)
        if query == index_query:
            return HelpReply(index_label, self._index.get(is_operator))
        entry = self._registry.lookup(query)
        if entry is None or not is_visible(entry, is_operator):
            return HelpNotFound(params)
        return HelpReply(query.upper(), entry.text)

    def handle(self, client, params, source):
        ''' Resolve params for client and send it the answer. Returns the
        HelpReply or HelpNotFound in case the caller cares. '''
        is_operator = client.is_operator
        outcome = self.resolve(params, is_operator)
        if self._log:
            if isinstance(outcome, HelpNotFound):
                self._log.info('No help for', client.nick, 'about',
                               repr(' '.join(outcome.params)))
            else:
                self._log.debug('Sending help', outcome.label, 'to',
                                client.nick)
        send_lines(client, source, outcome.lines())
        return outcome
