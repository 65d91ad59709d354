"""Orchestration of the emissions tidying workflow.

The tutorial notebook walks through each step with a named intermediate
table in the session. ``run_workflow`` performs the same steps as one
explicit pipeline: every table is passed to the next step as an argument and
all intermediates are returned together in a ``WorkflowResult``.
"""

from __future__ import annotations

import logging

import pandas as pd
from attrs import define, field

from ghg_tidy.library.config.models import WorkflowConfig
from ghg_tidy.library.preprocessing import load_wide_emissions
from ghg_tidy.library.utils.dataframes import (
    TidyDataFrame,
    WideDataFrame,
    normalize_party_names,
)
from ghg_tidy.library.wrangling import (
    filter_by_membership,
    filter_top_n,
    left_join,
    pivot_wide_to_long,
    project_columns,
    rank_within_year,
    reference_set,
    select_year,
)

logger = logging.getLogger(__name__)


@define(frozen=True, eq=False)
class WorkflowResult:
    """Every table produced by one run of the workflow.

    Attributes
    ----------
    config
        The configuration the run used
    wide
        The table as loaded
    projected
        Key column plus retained year columns, last inventory column renamed
    tidy
        One row per (Party, year)
    ranked
        ``tidy`` with the per-year ``annualrank``
    top_n
        Rows of ``ranked`` with ``annualrank <= config.top_n``
    cohort_parties
        Countries in the top N for ``config.year_filter`` (None without a year)
    cohort
        Full time series of ``tidy`` for ``cohort_parties``
    custom_subset
        Full time series of ``tidy`` for ``config.country_allowlist``
    joined
        The cohort (or the whole tidy table) left-joined with the auxiliary
        table, when one was given
    """

    config: WorkflowConfig
    wide: WideDataFrame
    projected: WideDataFrame
    tidy: TidyDataFrame
    ranked: TidyDataFrame
    top_n: TidyDataFrame
    cohort_parties: frozenset | None = field(default=None, kw_only=True)
    cohort: TidyDataFrame | None = field(default=None, kw_only=True)
    custom_subset: TidyDataFrame | None = field(default=None, kw_only=True)
    joined: pd.DataFrame | None = field(default=None, kw_only=True)


def run_workflow(
    config: WorkflowConfig,
    auxiliary: pd.DataFrame | None = None,
    wide: WideDataFrame | None = None,
) -> WorkflowResult:
    """
    Run load, project, reshape, rank, filter and join in order.

    Parameters
    ----------
    config
        Validated workflow configuration
    auxiliary
        Optional per-country table (e.g. fake GDP) to left-join
    wide
        Already-loaded wide table. If None, ``config.source_path`` is read.

    Returns
    -------
    WorkflowResult
        All intermediate tables
    """
    key = config.key_column

    if wide is None:
        wide = load_wide_emissions(
            config.source_path,
            key_column=key,
            na_values=config.na_values,
            thousands=config.thousands,
        )
    wide = normalize_party_names(wide, key)

    projected = project_columns(
        wide,
        config.retained_columns,
        key_column=key,
        last_year_column=config.last_year_column,
        last_year_label=config.last_year_label,
    )
    tidy = pivot_wide_to_long(projected, key_column=key, thousands=config.thousands)
    ranked = rank_within_year(tidy)
    top = filter_top_n(ranked, config.top_n)
    logger.info(
        "Tidy table has %d rows; top %d per year keeps %d",
        len(tidy),
        config.top_n,
        len(top),
    )

    cohort_parties = None
    cohort = None
    if config.year_filter is not None:
        cohort_parties = reference_set(select_year(top, config.year_filter), key)
        cohort = filter_by_membership(tidy, cohort_parties, key)
        logger.info(
            "Top %d in %s: %s",
            config.top_n,
            config.year_filter,
            sorted(cohort_parties),
        )

    custom_subset = None
    if config.country_allowlist is not None:
        unknown = sorted(set(config.country_allowlist) - reference_set(tidy, key))
        if unknown:
            logger.warning(
                "Countries in country_allowlist not found in the data: %s", unknown
            )
        custom_subset = filter_by_membership(tidy, config.country_allowlist, key)

    joined = None
    if auxiliary is not None:
        joined = left_join(cohort if cohort is not None else tidy, auxiliary, on=key)

    return WorkflowResult(
        config=config,
        wide=wide,
        projected=projected,
        tidy=tidy,
        ranked=ranked,
        top_n=top,
        cohort_parties=cohort_parties,
        cohort=cohort,
        custom_subset=custom_subset,
        joined=joined,
    )
