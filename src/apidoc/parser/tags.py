"""Tag markers recognized by the scanner."""

from enum import Enum

# Any line containing this belongs to the next tag.
TAG_PREFIX = "@api"


class Tag(str, Enum):
    URL = "@apiURL"
    METHODS = "@apiMethods"
    VERSION = "@apiVersion"
    GROUP = "@apiGroup"
    QUERY = "@apiQuery"
    REQUEST = "@apiRequest"
    STATUS = "@apiStatus"
    API = "@api"

    HEADER = "@apiHeader"
    PARAM = "@apiParam"
    EXAMPLE = "@apiExample"


# Matching order matters: @api is a prefix of every other marker and must come last.
TOP_LEVEL_TAGS = (
    Tag.URL,
    Tag.METHODS,
    Tag.VERSION,
    Tag.GROUP,
    Tag.QUERY,
    Tag.REQUEST,
    Tag.STATUS,
    Tag.API,
)

# Only valid inside @apiRequest / @apiStatus blocks.
NESTED_TAGS = (Tag.HEADER, Tag.PARAM, Tag.EXAMPLE)
