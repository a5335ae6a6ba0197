"""Client for running composed fragments against BigQuery."""

from __future__ import annotations

import logging
from collections.abc import Mapping

import pandas as pd
from google.cloud import bigquery

from .builders import raw
from .parameters import to_query_parameters
from .types import Fragment

logger = logging.getLogger(__name__)


class BigQuerySql:
    """Minimal BigQuery runner for parameterized fragments.

    Fragments are sent with ``?`` markers and positional query parameters, so
    values never end up in the SQL text.
    """

    def __init__(
        self,
        client: bigquery.Client | None = None,
        *,
        location: str | None = None,
        maximum_bytes_billed: int | None = None,
        labels: Mapping[str, str] | None = None,
    ) -> None:
        self.client = client or bigquery.Client()
        self.location = location
        self.maximum_bytes_billed = maximum_bytes_billed
        self.labels = dict(labels or {})

    def job_config(
        self, statement: Fragment | str, *, dry_run: bool = False
    ) -> bigquery.QueryJobConfig:
        """Return the job configuration binding ``statement``'s parameters."""

        fragment = self._normalize_statement(statement)
        config = bigquery.QueryJobConfig(
            query_parameters=to_query_parameters(fragment),
            dry_run=dry_run,
        )
        if self.maximum_bytes_billed is not None:
            config.maximum_bytes_billed = self.maximum_bytes_billed
        if self.labels:
            config.labels = dict(self.labels)
        return config

    def query(self, statement: Fragment | str) -> pd.DataFrame:
        """Execute ``statement`` and return the resulting dataframe."""

        return self._submit(statement).result().to_dataframe()

    def dry_run(self, statement: Fragment | str) -> int:
        """Return the number of bytes ``statement`` would process."""

        job = self._submit(statement, dry_run=True)
        return job.total_bytes_processed or 0

    def _submit(self, statement: Fragment | str, *, dry_run: bool = False):
        fragment = self._normalize_statement(statement)
        logger.debug(
            "Submitting BigQuery query with %d parameter(s)%s: %s",
            len(fragment.parameters),
            " (dry run)" if dry_run else "",
            fragment.query,
        )
        return self.client.query(
            fragment.query,
            job_config=self.job_config(fragment, dry_run=dry_run),
            location=self.location,
        )

    @staticmethod
    def _normalize_statement(statement: Fragment | str) -> Fragment:
        if isinstance(statement, str):
            return raw(statement)
        return statement
