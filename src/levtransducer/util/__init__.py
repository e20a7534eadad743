# Copyright 2007 Matt Chaput. All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
#    1. Redistributions of source code must retain the above copyright notice,
#       this list of conditions and the following disclaimer.
#
#    2. Redistributions in binary form must reproduce the above copyright
#       notice, this list of conditions and the following disclaimer in the
#       documentation and/or other materials provided with the distribution.
#
# THIS SOFTWARE IS PROVIDED BY MATT CHAPUT ``AS IS'' AND ANY EXPRESS OR
# IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE IMPLIED WARRANTIES OF
# MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO
# EVENT SHALL MATT CHAPUT OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT,
# INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT
# LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA,
# OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF
# LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING
# NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE,
# EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
#
# The views and conclusions contained in the software and documentation are
# those of the authors and should not be interpreted as representing official
# policies, either expressed or implied, of Matt Chaput.


import time
from bisect import bisect_left
from functools import wraps

from loguru import logger

from levtransducer.errors import AutomatonFinishedError

# Library code stays quiet until the application opts in
logger.disable("levtransducer")


now = time.perf_counter


def insort_keyed(items, keys, item, key):
    """
    Inserts ``item`` into ``items`` at the position ``key`` occupies in the
    sorted list ``keys``, keeping both lists parallel.

    Equal keys are not merged: the new item goes before any existing item with
    the same key.

    Args:
        items (list): The list receiving the item.
        keys (list): Sorted keys, one per element of ``items``.
        item (object): The object to insert.
        key (object): The sort key of ``item``.

    Returns:
        int: The index the item was inserted at.

    Example:
        >>> items, keys = ["b"], [(1, "b")]
        >>> insort_keyed(items, keys, "a", (0, "a"))
        0
        >>> items
        ['a', 'b']
    """
    i = bisect_left(keys, key)
    keys.insert(i, key)
    items.insert(i, item)
    return i


def unfinished(method):
    """
    Decorator for mutating methods of objects that can be frozen.

    The object must have a ``finished`` attribute. Calling the wrapped method
    once ``finished`` is true raises :class:`AutomatonFinishedError`.

    Args:
        method (callable): The method to be wrapped.

    Returns:
        callable: The wrapped method.
    """

    @wraps(method)
    def unfinished_wrapper(self, *args, **kwargs):
        if self.finished:
            raise AutomatonFinishedError(
                f"{type(self).__name__}.{method.__name__}() called after finish()"
            )
        return method(self, *args, **kwargs)

    return unfinished_wrapper
