# Copyright (c) 2026 Chromaquery
# SPDX-License-Identifier: MIT

import sys

from chromaquery.cli import main

sys.exit(main())
