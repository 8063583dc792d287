from threading import Thread


class PBThread:
    # All children of PBThread should have an __init__ that calls
    # this as the very first thing. target is the child's main loop.
    def __init__(self, target, *args, name=None, **kwargs):
        self._thread = Thread(target=target, args=args, kwargs=kwargs,
                              name=name)
        self._started = False

    @property
    def name(self):
        return self._thread.name

    # This should probably NOT be reimplemented in children. It starts the
    # thread.
    def start(self):
        self._started = True
        self._thread.start()
        return self

    # True once start() has been called, even if the thread has since exited.
    # Used to avoid starting a thread twice.
    def is_alive(self):
        return self._started

    # This should probably NOT be reimplemented in children.
    def join(self, timeout=None):
        if not self._started:
            return None
        return self._thread.join(timeout=timeout)

    # Children MUST reimplement this, pulling out of the global state only the
    # things they actually use.
    def update_global_state(self, gs):
        raise NotImplementedError()
