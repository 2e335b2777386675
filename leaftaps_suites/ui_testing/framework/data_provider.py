"""
================================================================================
Data Provider
================================================================================

Supplies rows of test input from YAML data sheets.

A test case names its sheet (`data_file_name = "CreateLead"`); the sheet lives
at `<data directory>/CreateLead.yaml`:

    columns: [username, password, company_name, first_name, last_name]
    rows:
      - [demosalesmanager, crmsfa, TestLeaf, Hari, R]
      - id: second-lead
        username: demosalesmanager
        password: crmsfa
        company_name: Qeagle
        first_name: Babu
        last_name: M

Rows may be positional lists or mappings keyed by column name. Each row
becomes one `pytest.param`, so one sheet drives one test invocation per row.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import pytest
import yaml
from loguru import logger

from .config_loader import ConfigLoader
from .exceptions import DataProviderError


PACKAGE_DIR = Path(__file__).resolve().parent.parent.parent

SHEET_SUFFIXES = (".yaml", ".yml")


@dataclass
class DataSheet:
    """A named table of test input rows."""
    name: str
    columns: List[str]
    rows: List[Dict[str, Any]] = field(default_factory=list)
    row_ids: List[str] = field(default_factory=list)

    def values(self) -> List[tuple]:
        """Row values as tuples in column order."""
        return [tuple(row[col] for col in self.columns) for row in self.rows]

    def as_params(self) -> List[Any]:
        """Rows as `pytest.param` objects for `metafunc.parametrize`."""
        return [
            pytest.param(*values, id=row_id)
            for values, row_id in zip(self.values(), self.row_ids)
        ]

    def __len__(self) -> int:
        return len(self.rows)


def default_data_directory() -> Path:
    """Resolve `data.directory` from config; relative paths hang off the package."""
    directory = Path(ConfigLoader().get("data.directory", "ui_testing/data"))
    if not directory.is_absolute():
        directory = PACKAGE_DIR / directory
    return directory


class DataProvider:
    """
    Loads data sheets by name.

    Example:
        provider = DataProvider()
        sheet = provider.fetch_data("CreateLead")
        for row in sheet.rows:
            print(row["company_name"])
    """

    def __init__(self, data_dir: Optional[Union[str, Path]] = None):
        """
        Initialize the data provider.

        Args:
            data_dir: Directory holding the sheets. Defaults to `data.directory`.
        """
        self.data_dir = Path(data_dir) if data_dir else default_data_directory()

    def sheet_path(self, name: str) -> Path:
        """Return the first existing file for `name`, or raise."""
        for suffix in SHEET_SUFFIXES:
            candidate = self.data_dir / f"{name}{suffix}"
            if candidate.exists():
                return candidate
        raise DataProviderError(
            f"Data sheet '{name}' not found in {self.data_dir}"
        )

    def fetch_data(self, name: str) -> DataSheet:
        """
        Load the sheet called `name`.

        Args:
            name: Sheet name without extension

        Returns:
            DataSheet with one dict per row

        Raises:
            DataProviderError: When the sheet is missing or malformed
        """
        path = self.sheet_path(name)

        with open(path, "r", encoding="utf-8") as f:
            content = yaml.safe_load(f)

        if not content:
            raise DataProviderError(f"Data sheet is empty: {path}")
        if not isinstance(content, dict):
            raise DataProviderError(f"Data sheet root must be a mapping: {path}")

        columns = content.get("columns")
        if not columns or not isinstance(columns, list):
            raise DataProviderError(f"Data sheet has no 'columns' list: {path}")
        columns = [str(col) for col in columns]

        raw_rows = content.get("rows") or []
        if not raw_rows:
            raise DataProviderError(f"Data sheet has no rows: {path}")

        sheet = DataSheet(name=name, columns=columns)
        for index, raw in enumerate(raw_rows, start=1):
            row, row_id = self._parse_row(raw, columns, index, path)
            sheet.rows.append(row)
            sheet.row_ids.append(row_id or f"{name}-{index}")

        logger.info(f"Loaded {len(sheet)} rows from {path.name}")
        return sheet

    def _parse_row(
        self,
        raw: Any,
        columns: List[str],
        index: int,
        path: Path,
    ) -> tuple[Dict[str, Any], Optional[str]]:
        """Turn one list/mapping row into a column-ordered dict and optional id."""
        if isinstance(raw, list):
            if len(raw) != len(columns):
                raise DataProviderError(
                    f"Row {index} in {path.name} has {len(raw)} values, "
                    f"expected {len(columns)}"
                )
            return {col: _cell(value) for col, value in zip(columns, raw)}, None

        if isinstance(raw, dict):
            raw = dict(raw)
            row_id = raw.pop("id", None)
            if set(raw) != set(columns):
                missing = sorted(set(columns) - set(raw))
                extra = sorted(set(raw) - set(columns))
                raise DataProviderError(
                    f"Row {index} in {path.name} does not match columns "
                    f"(missing={missing}, extra={extra})"
                )
            return {col: _cell(raw[col]) for col in columns}, (
                str(row_id) if row_id is not None else None
            )

        raise DataProviderError(
            f"Row {index} in {path.name} must be a list or a mapping"
        )


def _cell(value: Any) -> str:
    # cells are form text; YAML's 12345 or No must not reach a page as int/bool
    return "" if value is None else str(value)


__all__ = [
    "DataProvider",
    "DataSheet",
    "default_data_directory",
]
