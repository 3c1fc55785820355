# SPDX-FileCopyrightText: 2025 sharecheck contributors
# SPDX-License-Identifier: MIT

from .cli import main

main()
