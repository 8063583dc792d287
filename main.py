#!/usr/bin/env python3
# python stuff
import sys
from configparser import ConfigParser
from threading import Event
# my stuff
from client import Client
from helpdocumentation import HelpIndex, default_registry
from helpquerythread import HelpQueryThread
from helpresolver import HelpResolver
from outboundmessagethread import OutboundMessageThread
from pastlylogger import PastlyLogger

help_commands = ['help', 'helpop']


def create_logger(conf):
    if 'log' not in conf:
        return PastlyLogger(debug='/dev/stdout', overwrite=['debug'],
                            log_threads=True, default='notice')
    kwargs = {}
    for level in PastlyLogger.levels:
        if level in conf['log']:
            kwargs[level] = conf['log'][level]
    if not len(kwargs):
        kwargs['debug'] = '/dev/stdout'
    return PastlyLogger(overwrite=['debug'], log_threads=True,
                        default='notice', **kwargs)


def create_help(gs):
    ''' Build the help registry and everything that reads it. This happens
    before any thread that answers queries exists. '''
    registry = default_registry(log=gs['log'])
    index = HelpIndex(registry)
    gs['help']['registry'] = registry
    gs['help']['index'] = index
    gs['help']['resolver'] = HelpResolver(registry, index=index, log=gs['log'])
    return gs


def create_client(gs, nick, is_operator, wfile):
    client = Client(nick, is_operator=is_operator, wfile=wfile,
                    out_msg_thread=gs['threads']['out_message'],
                    log=gs['log'])
    gs['clients'][nick] = client
    gs['threads']['help_queries'][nick] = HelpQueryThread(gs, client)
    return client


def create_threads(gs):
    gs['log'] = create_logger(gs['conf'])
    gs = create_help(gs)

    gs['threads']['out_message'] = OutboundMessageThread(gs, long_timeout=1)

    if 'client' in gs['conf']:
        nick = gs['conf']['client'].get('nick', '*')
        is_operator = gs['conf'].getboolean(
            'client', 'operator', fallback=False)
    else:
        nick, is_operator = '*', False
    create_client(gs, nick, is_operator, sys.stdout)

    for t in gs['threads']:
        thread = gs['threads'][t]
        if thread is None:
            continue
        if isinstance(thread, dict):
            for thread_ in thread:
                if not thread[thread_].is_alive():
                    thread[thread_].start()
        else:
            if not thread.is_alive():
                thread.start()
    return gs


def destroy_threads(gs):
    gs['events']['kill_help_queries'].set()
    gs['log'].notice('Waiting for help query threads ...')
    for t in gs['threads']['help_queries']:
        gs['threads']['help_queries'][t].join()

    gs['events']['kill_outmessage'].set()
    gs['log'].notice('Waiting for out message thread ...')
    gs['threads']['out_message'].join()
    return gs


def proc_console_line(gs, client, line):
    ''' Each line is treated as a command from client. Only HELP and HELPOP
    are understood. '''
    words = line.split()
    if not len(words):
        return False
    if words[0].lower() not in help_commands:
        gs['log'].info('Ignoring unknown command', words[0])
        return False
    gs['threads']['help_queries'][client.nick].recv_query(words[1:])
    return True


def main(config_file='config.ini'):
    gs = {
        'threads': {
            'help_queries': {},
            'out_message': None,
        },
        'events': {
            'kill_help_queries': Event(),
            'kill_outmessage': Event(),
        },
        'help': {
            'registry': None,
            'index': None,
            'resolver': None,
        },
        'clients': {},
        'conf': ConfigParser(),
        'log': None,
    }

    gs['conf'].read(config_file)
    gs = create_threads(gs)
    client = list(gs['clients'].values())[0]
    gs['log']('All started. Answering help for', client)
    try:
        for line in sys.stdin:
            proc_console_line(gs, client, line)
    except KeyboardInterrupt:
        pass
    gs = destroy_threads(gs)
    gs['log']('Bye bye')
    gs['log'].close()


if __name__ == '__main__':
    main(*sys.argv[1:2])
