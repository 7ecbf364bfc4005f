'''`pylaborate` namespace package, via the `pylaborate.patharg` distribution

## Overview

The `pylaborate` package represents a namespace package.

This definition of the namespace package is provided via the
`pylaborate.patharg` distribution.
'''

from pkgutil import extend_path
__path__ = extend_path(__path__, __name__)
