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

"""
Fast approximate dictionary matching with universal Levenshtein automata.

A :class:`~levtransducer.transducer.Transducer` compiles a word list into a
minimal acyclic word graph once, then answers queries of the form "every
dictionary term within edit distance n of this term"::

    >>> from levtransducer.transducer import Transducer
    >>> t = Transducer(["cat", "cats", "cot", "dog"])
    >>> t.candidates("cot", 1)
    [Match(term='cot', distance=0), Match(term='cat', distance=1)]

The package logs through loguru and is silent by default. Call
``logger.enable("levtransducer")`` to see construction and query traces.
"""

__version__ = (1, 2, 0)


def versionstring(build=True, extra=True):
    """
    Returns the version number of LevTransducer as a string.

    Args:
        build (bool): Whether to include the build number in the version string.
        extra (bool): Whether to include alpha/beta/rc etc. tags.

    Returns:
        str: The version string.
    """
    if build:
        first = 3
    else:
        first = 2

    s = ".".join(str(n) for n in __version__[:first])
    if extra:
        s += "".join(str(n) for n in __version__[3:])

    return s
