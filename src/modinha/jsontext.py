import json
import logging

from modinha.errors import JSONParseError

logger = logging.getLogger(__name__)


def parse_json(text):
    """
    Parse a whole JSON document given as ``str`` or ``bytes``.

    Any parser failure is reported as :class:`JSONParseError`; the decoder's
    own exception is kept as ``__cause__``.

        >>> parse_json('{"name": "modinha"}')
        {'name': 'modinha'}
    """
    try:
        return json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as err:
        logger.debug("bad JSON input: %s", err)
        raise JSONParseError() from err
