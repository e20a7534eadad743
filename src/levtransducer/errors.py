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
Exceptions raised by the transducer and the dictionary automaton.

Only two situations produce errors: a transducer built from a malformed
dictionary or malformed options, and a dictionary automaton fed words out of
order (or after it was finished). A query that simply has no match returns an
empty list.
"""


class LevTransducerError(Exception):
    """
    Base class for all errors raised by this package.
    """


class ConfigurationError(LevTransducerError, ValueError):
    """
    Raised when a :class:`~levtransducer.transducer.Transducer` is constructed
    with a missing dictionary or with invalid options. The input must be fixed
    before trying again.
    """


class OptionTypeError(ConfigurationError, TypeError):
    """
    Raised when the dictionary or an option has the wrong type, for example a
    non-boolean value for ``sort_accepted``.
    """


class UnsupportedAlgorithmError(ConfigurationError):
    """
    Raised when the requested algorithm is not one of ``"standard"``,
    ``"transposition"`` or ``"merge_and_split"``.
    """


class UnsortedInputError(LevTransducerError, ValueError):
    """
    Raised when words are inserted into a dictionary automaton in decreasing
    lexicographic order.
    """


class AutomatonFinishedError(LevTransducerError, RuntimeError):
    """
    Raised when inserting into a dictionary automaton after it was finished.
    """
