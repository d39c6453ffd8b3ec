# psview - A PostScript Interpreter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
psview Types Constants Module

This module contains the constants used throughout the psview interpreter:
stack limits, access modes, attributes, object type tags and the executor
states. These values define how objects are classified and constrained.
"""

# Stack limits (defaults for the system parameters)
O_STACK_MAX = 500                           # Operand stack maximum depth
D_STACK_MAX = 250                           # Dictionary stack maximum depth
E_DEPTH_MAX = 250                           # Maximum nesting of procedure execution
G_STACK_MAX = 20                            # Graphics state stack maximum depth

# Integer range (signed 64-bit)
MAX_INTEGER = 2**63 - 1
MIN_INTEGER = -(2**63)

# access types
ACCESS_UNLIMITED = 3                        # Can read, write, and execute
ACCESS_READ_ONLY = 2                        # Can read but not write
ACCESS_EXECUTE_ONLY = 1                     # Can execute but not read/write
ACCESS_NONE = 0                             # No access allowed

# attribute types
ATTRIB_LIT = 0
ATTRIB_EXEC = 1

# PSObject types
T_ARRAY = 0
T_DICT = 1
T_INT = 2
T_NAME = 3
T_OPERATOR = 4
T_REAL = 5
T_STRING = 6

# Type grouping constants for fast type checking
NUMERIC_TYPES = frozenset({T_INT, T_REAL})

# Executor states
STATE_IDLE = 0
STATE_SCANNING = 1
STATE_DISPATCHING = 2
STATE_FAILED = 3

# line cap types
LINE_CAP_BUTT = 0
LINE_CAP_ROUND = 1
LINE_CAP_SQUARE = 2

# line join types
LINE_JOIN_MITER = 0
LINE_JOIN_ROUND = 1
LINE_JOIN_BEVEL = 2

# color spaces
COLOR_SPACE_GRAY = 0
COLOR_SPACE_RGB = 1

# Winding Rule types
WINDING_NON_ZERO = 0
WINDING_EVEN_ODD = 1

# points per inch
PPI = 72.0
