import logging
import threading

import config

logger = logging.getLogger(__name__)


class ParentRegistry(object):
    '''
    Cache of parent objects (fields, free modules) keyed by their
    construction parameters, so that building the same parent twice gives
    back the same object.

    Lookup-or-insert runs under a lock. Entries live until clear() is called.
    '''
    _entries = {}
    _lock = None

    def __init__(self):
        self._entries = {}
        self._lock = threading.Lock()

    def get_or_create(self, key, factory, cached=None):
        '''
        :param key: hashable construction parameters.
        :param factory: zero-argument callable building the parent.
        :param cached: when False, a fresh parent is built and not stored.
        :return: the cached parent for key, or a new one.
        '''
        if cached is None:
            cached = config.DEFAULT_CACHED

        if not cached:
            return factory()

        with self._lock:
            if key in self._entries:
                return self._entries[key]
            parent = factory()
            self._entries[key] = parent
            logger.debug('Registered parent %s for key %r', parent, key)
            return parent

    def clear(self):
        with self._lock:
            self._entries.clear()

    def __contains__(self, key):
        with self._lock:
            return key in self._entries

    def __len__(self):
        with self._lock:
            return len(self._entries)


default_registry = ParentRegistry()
