from collections import namedtuple
from enum import Enum


class HelpEntryType(Enum):
    ''' Which section of the help index an entry is listed under '''
    COMMAND = 1
    INFORMATION = 2
    ISUPPORT = 3


# name: lowercase topic name
# text: body sent back to the client, newlines are significant
# type: HelpEntryType
# oper: only visible to IRC operators
# alias: queryable, but duplicates another entry so left out of the index
HelpEntry = namedtuple('HelpEntry', ['name', 'text', 'type', 'oper', 'alias'])


def is_visible(entry, is_operator):
    ''' The one access check. Both the index and topic lookups go through
    this so they can't disagree about what a non-oper may see. '''
    return not entry.oper or is_operator
