# homebank_helper/controllers/xhb_loader.py
from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from homebank_helper.data_model import HomeBankDb
from homebank_helper.data_model.xhb_parsers import XhbFileParser
from homebank_helper.utilities.core_util import open_for_read, resolve_path

log = logging.getLogger(__name__)


# region Errors


class HomeBankDbError(Exception):
    """Loading an XHB file failed; ``path`` is the file that was being loaded."""

    message = "Error loading XHB file `{path}`."

    def __init__(self, path: Path):
        self.path = path
        super().__init__(self.message.format(path=path))


class DoesNotExistError(HomeBankDbError):
    message = "XHB file `{path}` does not exist."


class CouldNotOpenError(HomeBankDbError):
    message = "Error opening XHB file `{path}`."


class CouldNotReadError(HomeBankDbError):
    message = "Error reading XHB file `{path}`."


class CouldNotParseError(HomeBankDbError):
    message = "Error parsing XHB file `{path}`."


# endregion Errors


def load_database(path: Path | str) -> HomeBankDb:
    """
    Load a HomeBank ``.xhb`` file.

    The path has ``~`` expanded and is made absolute before anything else.
    Records that fail to decode are dropped and tallied in ``db.report``;
    only file-level problems raise a :class:`HomeBankDbError`.
    """
    resolved = resolve_path(path)
    if not resolved.exists():
        raise DoesNotExistError(resolved)

    log.info("Loading XHB: %s", resolved)
    try:
        fh = open_for_read(resolved, binary=True)
    except OSError as e:
        raise CouldNotOpenError(resolved) from e

    with fh:
        try:
            db = XhbFileParser().parse(fh)
        except ET.ParseError as e:
            raise CouldNotParseError(resolved) from e
        except OSError as e:
            raise CouldNotReadError(resolved) from e

    log.info(
        "Loaded %d transaction(s) from %s (%s)",
        len(db.transactions),
        resolved,
        db.report,
    )
    return db
