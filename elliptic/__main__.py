"""
Copyright (c) 2019-2020, the Decred developers
See LICENSE for details
"""

import sys

from elliptic.app import main


sys.exit(main())
