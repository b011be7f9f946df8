# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2025 Maurice Garcia

from macfmt.cli import main

raise SystemExit(main())
