
VERSION = (0, 1, 0)
VERSION_STR = f"{VERSION[0]}.{VERSION[1]}.{VERSION[2]}{'-' +  str(VERSION[-1]) if len(VERSION) > 3 else ''}"

DESCRIPTION = "A minimal free-form command-line argument parser"

SEPARATOR = "--"
LONG_PREFIX = "--"
SHORT_PREFIX = "-"
VALUE_DELIMITER = "="
LIST_DELIMITER = ","
