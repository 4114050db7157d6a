# -----------------------------------------------------------------------------
# es7s/hexed [Hex dump viewer with byte class highlighting]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------

class ArgumentError(Exception):
    USAGE_MSG = "Run the app with '--help' argument to see the usage"


class PathError(Exception):
    USAGE_MSG = "Check that the file exists and is readable"
