"""Common constants for batchprint.

This module defines defaults shared by the renderers, the options layer and
the command line.
"""

# Producer info - identifies the implementation that rendered the output
PRODUCER = {
    "name": "batchprint",
    "version": "0.1.0",
}

# Rows shown by a bordered table before truncation kicks in
DEFAULT_MAX_ROWS = 40

# Rows buffered by the streaming printer before column widths are fixed
DEFAULT_PREVIEW_LIMIT = 1000

# Rows of dots drawn where a truncated table elides data
ELLIPSIS_ROW_COUNT = 3
