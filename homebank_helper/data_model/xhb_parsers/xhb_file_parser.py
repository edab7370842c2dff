# homebank_helper/data_model/xhb_parsers/xhb_file_parser.py
from __future__ import annotations

import logging
import os
import xml.etree.ElementTree as ET
from typing import IO, Callable, Iterable, Optional, Union

from ..hb_wrapper import HomeBankDb
from .decode_errors import DecodeError
from .entity_decoders import (
    decode_account,
    decode_category,
    decode_currency,
    decode_group,
    decode_payee,
    decode_properties,
    decode_schema,
)
from .transaction_decoder import decode_transaction

log = logging.getLogger(__name__)

ROOT_TAG = "homebank"

Attributes = Iterable[tuple[str, str]]
Source = Union[str, "os.PathLike[str]", IO[bytes]]


def _local_name(tag: str) -> str:
    """Strip any ``{namespace}`` prefix from an element tag."""
    return tag.rsplit("}", 1)[-1]


class XhbFileParser:
    """
    Streaming builder of a :class:`HomeBankDb` from XHB XML.

    One forward pass over ``iterparse`` events. Only elements inside
    ``<homebank>`` are decoded; each finished record is cleared and detached
    from the root so memory stays flat on large files. A record whose
    decoder raises :class:`DecodeError` is logged, counted in
    ``db.report.dropped`` and skipped. Malformed XML (``ET.ParseError``)
    propagates to the caller.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, Callable[[HomeBankDb, Attributes], None]] = {
            "properties": self._on_properties,
            "cur": self._on_currency,
            "grp": self._on_group,
            "account": self._on_account,
            "pay": self._on_payee,
            "cat": self._on_category,
            "ope": self._on_transaction,
        }

    # region Element handlers

    @staticmethod
    def _on_schema(db: HomeBankDb, attrs: Attributes) -> None:
        db.schema = decode_schema(attrs)

    @staticmethod
    def _on_properties(db: HomeBankDb, attrs: Attributes) -> None:
        db.properties = decode_properties(attrs)

    @staticmethod
    def _on_currency(db: HomeBankDb, attrs: Attributes) -> None:
        cur = decode_currency(attrs)
        db.currencies[cur.key] = cur

    @staticmethod
    def _on_group(db: HomeBankDb, attrs: Attributes) -> None:
        grp = decode_group(attrs)
        db.groups[grp.key] = grp

    @staticmethod
    def _on_account(db: HomeBankDb, attrs: Attributes) -> None:
        acct = decode_account(attrs)
        db.accounts[acct.key] = acct

    @staticmethod
    def _on_payee(db: HomeBankDb, attrs: Attributes) -> None:
        pay = decode_payee(attrs)
        db.payees[pay.key] = pay

    @staticmethod
    def _on_category(db: HomeBankDb, attrs: Attributes) -> None:
        cat = decode_category(attrs)
        db.categories[cat.key] = cat

    @staticmethod
    def _on_transaction(db: HomeBankDb, attrs: Attributes) -> None:
        db.transactions.append(decode_transaction(attrs))

    # endregion Element handlers

    def _dispatch(
        self,
        db: HomeBankDb,
        tag: str,
        handler: Callable[[HomeBankDb, Attributes], None],
        attrs: Attributes,
    ) -> None:
        try:
            handler(db, attrs)
        except DecodeError as e:
            db.report.dropped[tag] += 1
            log.debug("Dropped <%s>: %s", tag, e)
            return
        db.report.decoded[tag] += 1

    def parse(self, source: Source) -> HomeBankDb:
        """
        Build the database from ``source`` (a path or a binary file object).

        Raises ``xml.etree.ElementTree.ParseError`` when the document is not
        well-formed.
        """
        db = HomeBankDb()
        depth = 0
        root_depth: Optional[int] = None
        root: Optional[ET.Element] = None

        for event, elem in ET.iterparse(source, events=("start", "end")):
            tag = _local_name(elem.tag)
            if event == "start":
                depth += 1
                if root_depth is None:
                    if tag == ROOT_TAG:
                        root_depth = depth
                        root = elem
                        self._dispatch(db, tag, self._on_schema, elem.attrib.items())
                else:
                    handler = self._handlers.get(tag)
                    if handler is not None:
                        self._dispatch(db, tag, handler, elem.attrib.items())
                continue

            if depth == root_depth:
                root_depth = None
                root = None
            depth -= 1
            if depth > 0:
                elem.clear()
            # finished records must not pile up under <homebank>
            if root is not None and depth == root_depth:
                root.clear()

        if db.report.total_dropped:
            log.warning(
                "Dropped %d invalid record(s) while loading: %s",
                db.report.total_dropped,
                dict(db.report.dropped),
            )
        return db


def build_database(source: Source) -> HomeBankDb:
    """Convenience wrapper: ``XhbFileParser().parse(source)``."""
    return XhbFileParser().parse(source)
