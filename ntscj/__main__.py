# Copyright (c) 2026 ntscj
# SPDX-License-Identifier: MIT

import sys

from ntscj.runtime.cli import main

sys.exit(main())
