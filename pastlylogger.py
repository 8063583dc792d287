from datetime import datetime
from threading import Lock, current_thread


class PastlyLogger:
    ''' Logs to one file per level. A level without its own file falls
    through to the next less severe level that has one:

        error -> warn -> notice -> info -> debug

    so with only debug configured, everything ends up in the debug file.

    >>> log = PastlyLogger(debug='/dev/stdout', notice='helpop.log')
    >>> log.warn('Help alias', 'snomask', 'looks odd')  # goes to helpop.log
    >>> log('Ready')  # logged at the default level

    All arguments to a log call are joined with spaces. '''
    levels = ['debug', 'info', 'notice', 'warn', 'error']

    def __init__(self, error=None, warn=None, notice=None,
                 info=None, debug=None, overwrite=[], log_threads=False,
                 default='notice'):
        assert default in PastlyLogger.levels
        self._log_threads = log_threads
        self._default = default
        self._fds = {}
        self._mutexes = {}
        fnames = {'error': error, 'warn': warn, 'notice': notice,
                  'info': info, 'debug': debug}
        # several levels may share one file, and then they share its lock too
        opened = {}
        for level in PastlyLogger.levels:
            fname = fnames[level]
            if not fname:
                self._fds[level] = None
                self._mutexes[level] = None
                continue
            if fname not in opened:
                # buffering=1 means line-based buffering
                fd = open(fname, 'w' if level in overwrite else 'a',
                          buffering=1)
                opened[fname] = (fd, Lock())
            self._fds[level], self._mutexes[level] = opened[fname]

        self.debug('Creating PastlyLogger instance')

    def close(self):
        self.debug('Closing PastlyLogger instance')
        closed = set()
        for level in PastlyLogger.levels:
            fd = self._fds[level]
            if fd and id(fd) not in closed:
                closed.add(id(fd))
                with self._mutexes[level]:
                    fd.close()
            self._fds[level] = None

    def flush(self):
        for level in PastlyLogger.levels:
            if self._fds[level]:
                with self._mutexes[level]:
                    self._fds[level].flush()

    def _log_file(self, fd, lock, level, *s):
        assert fd
        message = ' '.join([str(m) for m in s])
        ts = datetime.now()
        with lock:
            if self._log_threads:
                fd.write('[{}] [{}] [{}] {}\n'.format(
                    ts, level, current_thread().name, message))
            else:
                fd.write('[{}] [{}] {}\n'.format(ts, level, message))

    def _log(self, wanted_level, level, *s):
        # walk from the wanted level towards debug until we find a file
        i = PastlyLogger.levels.index(wanted_level)
        for fallback in reversed(PastlyLogger.levels[:i+1]):
            if self._fds[fallback]:
                return self._log_file(
                    self._fds[fallback], self._mutexes[fallback], level, *s)
        return None

    def __call__(self, *s):
        return self._log(self._default, self._default, *s)

    def debug(self, *s):
        return self._log('debug', 'debug', *s)

    def info(self, *s):
        return self._log('info', 'info', *s)

    def notice(self, *s):
        return self._log('notice', 'notice', *s)

    def warn(self, *s):
        return self._log('warn', 'warn', *s)

    def error(self, *s):
        return self._log('error', 'error', *s)
