# Numerics used to answer HELP/HELPOP
RPL_HELPSTART = '704'
RPL_HELPTXT = '705'
RPL_ENDOFHELP = '706'
ERR_HELPNOTFOUND = '524'

end_of_help_msg = 'End of help'
help_not_found_msg = 'Help not found'


def frame_help(label, text):
    ''' Turn a help body into the list of (numeric, args) reply lines that
    carry it to a client.

    The first line of text goes out as RPL_HELPSTART, every other line as
    RPL_HELPTXT, and one RPL_ENDOFHELP closes it off. Each reply starts with
    the words of label, so a body of k lines always takes k+1 replies.

    >>> frame_help('AWAY', 'AWAY [message]\\n\\nMarks you away.')
    [('704', ['AWAY', 'AWAY [message]']), ('705', ['AWAY', '']),
     ('705', ['AWAY', 'Marks you away.']), ('706', ['AWAY', 'End of help'])]
    '''
    split_label = label.split(' ')
    lines = []
    for i, line in enumerate(text.split('\n')):
        numeric = RPL_HELPSTART if i == 0 else RPL_HELPTXT
        lines.append((numeric, split_label + [line]))
    lines.append((RPL_ENDOFHELP, split_label + [end_of_help_msg]))
    return lines


def not_found_reply(params):
    ''' The single error reply, echoing back what the client asked for '''
    return (ERR_HELPNOTFOUND, list(params) + [help_not_found_msg])


def send_lines(client, source, lines):
    ''' Hand each (numeric, args) line to the client's sink, in order. Whether
    they actually get delivered is the sink's problem, not ours. '''
    for numeric, args in lines:
        client.send(source, numeric, args)
