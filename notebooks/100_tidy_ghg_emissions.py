# ---
# jupyter:
#   jupytext:
#     cell_metadata_filter: tags,-all
#     formats: ipynb,py:percent
#     text_representation:
#       extension: .py
#       format_name: percent
#       format_version: '1.3'
#       jupytext_version: 1.16.6
#   kernelspec:
#     display_name: Python 3 (ipykernel)
#     language: python
#     name: python3
# ---

# %% [markdown]
# # Tidying Greenhouse Gas Emissions Data
#
# **From a wide inventory export to tidy tables and a trend chart.**
#
# Greenhouse gas inventories are usually published as "wide" tables: one row per
# country (`Party`) and one column per year. That layout is easy to read but
# awkward to analyse. Questions like "who were the ten largest emitters each
# year?" need one row per observation instead.
#
# **Workflow:**
# 1. **Load** - Read the export into a DataFrame
# 2. **Select & rename** - Keep the year columns, fix the irregular last-year header
# 3. **Tidy** - Pivot wide to long: one row per (Party, year)
# 4. **Rank & filter** - Rank countries within each year, keep the top N
# 5. **Filter by membership** - Recover full time series for a top-N cohort
# 6. **Join** - Attach a per-country attribute with a left join
# 7. **Plot** - Emissions over time, one line per country
#
# Each step is a function in `ghg_tidy.library`. Every step takes a table and
# returns a new one, so you can re-run any cell without side effects.

# %%
# Imports (run this first)
import matplotlib.pyplot as plt
import pandas as pd
from pyprojroot import here

from ghg_tidy.library.plotting import plot_emissions_trends, top_n_title
from ghg_tidy.library.preprocessing import load_wide_emissions
from ghg_tidy.library.utils import add_iso3c_column, normalize_party_names
from ghg_tidy.library.utils.data import (
    build_workflow_config,
    create_fake_gdp,
    load_workflow_config,
)
from ghg_tidy.library.wrangling import (
    filter_by_membership,
    filter_top_n,
    left_join,
    pivot_long_to_wide,
    pivot_wide_to_long,
    project_columns,
    rank_within_year,
    reference_set,
    select_year,
)

plt.style.use("default")
plt.rcParams["axes.grid"] = True
plt.rcParams["grid.alpha"] = 0.3

project_root = here()

# %% tags=["parameters"]
# Complete WorkflowConfig settings injected by ghg_tidy.run_tutorial
workflow_settings = None

# %%
if workflow_settings is not None:
    print("Running via Papermill")
    config = build_workflow_config(workflow_settings)
else:
    print("Running interactively - using conf/workflow.yaml")
    config = load_workflow_config()

print(f"Project root: {project_root}")
print(f"Source file: {config.source_path}")
print(f"Retained columns: {config.retained_columns}")
print(f"Last inventory column: {config.last_year_column}")
print(f"Top N: {config.top_n}")
print(f"Cohort year: {config.year_filter}")
print(f"Practice countries: {config.country_allowlist}")

# %% [markdown]
# ---
# ## Step 1: Load the data
#
# The example file follows the layout of the UNFCCC "GHG total without LULUCF"
# time series export. The numbers are rounded and smoothed for teaching;
# download the current export from the UNFCCC data interface for real analysis.
#
# **Before loading a fresh export:** open it in a text editor and delete the
# title rows above the header. The first line must be the header row.
#
# Inventories use notation keys such as `NO` (not occurring) or `NE` (not
# estimated) instead of numbers. These are read as missing values, never as zero:
# a zero would quietly promote a country in the rankings below.

# %%
ghg_ex = load_wide_emissions(
    config.source_path,
    key_column=config.key_column,
    na_values=config.na_values,
    thousands=config.thousands,
)
ghg_ex = normalize_party_names(ghg_ex, config.key_column)

print(f"Shape: {ghg_ex.shape}")
ghg_ex.head()

# %%
# Which columns do we have, and where?
list(enumerate(ghg_ex.columns))

# %% [markdown]
# ---
# ## Step 2: Select columns and rename the last year
#
# We keep the `Party` column and the year columns, and drop `Base year` and the
# trailing percentage-change column.
#
# The most recent year is called `Last Inventory Year (2015)`. Every other year
# column is just a year, so we rename it to `2015`. If the column is missing
# (say, a newer export calls it `Last Inventory Year (2016)`) this step stops
# with an error naming the closest match, rather than carrying on with a
# column of blanks.
#
# The configuration selects year columns by position (`start`/`stop`, like
# `iloc`). Positions are turned into names once, here, and checked.

# %%
ghg_projected = project_columns(
    ghg_ex,
    config.retained_columns,
    key_column=config.key_column,
    last_year_column=config.last_year_column,
    last_year_label=config.last_year_label,
)

print(f"Kept {len(ghg_projected.columns)} columns:")
print(list(ghg_projected.columns))

# %% [markdown]
# ---
# ## Step 3: Pivot wide to long
#
# Each (country, year column) cell becomes one row with three columns:
# `Party`, `year` and `emissions`. Missing cells become rows with a missing
# value; they are not dropped. So the long table always has exactly
# `rows x year columns` rows.

# %%
ghg_tidy = pivot_wide_to_long(
    ghg_projected, key_column=config.key_column, thousands=config.thousands
)

n_years = len(ghg_projected.columns) - 1
print(f"{len(ghg_projected)} countries x {n_years} years = {len(ghg_tidy)} rows")
assert len(ghg_tidy) == len(ghg_projected) * n_years

ghg_tidy.head(10)

# %%
# Missing observations are still here, as NaN
ghg_tidy[ghg_tidy["emissions"].isna()]

# %% [markdown]
# Pivoting back gives the table we started from. This is a useful check any
# time you reshape data.

# %%
ghg_back = pivot_long_to_wide(ghg_tidy, key_column=config.key_column)
pd.testing.assert_frame_equal(
    ghg_back,
    ghg_projected.reset_index(drop=True),
    check_column_type=False,
    check_dtype=False,
)
print("Round trip OK")

# %% [markdown]
# ---
# ## Step 4: Rank within each year
#
# We group by `year` and rank `emissions` from largest (rank 1) to smallest.
# Each year is ranked on its own, so a change in 1990 cannot move anyone's rank
# in 2015.
#
# **Ties:** two countries with identical emissions in a year are ranked in
# the order they appear in the table. Every reporting country gets its own
# rank, so "top 10" is always exactly ten rows when ten countries report.
# Countries with no value that year get no rank.

# %%
ghg_ranked = rank_within_year(ghg_tidy)
ghg_ranked.sort_values(["year", "annualrank"]).head(12)

# %% [markdown]
# ---
# ## Step 5: Top N emitters
#
# Keep the rows with `annualrank <= N`. Note that the European Union appears
# as a Party alongside its member states; it is an aggregate, so you may want
# to remove it before ranking in your own analysis.

# %%
ghg_top = filter_top_n(ghg_ranked, config.top_n)
print(f"Top {config.top_n} per year: {len(ghg_top)} rows")

if config.year_filter is not None:
    top_year = select_year(ghg_top, config.year_filter).sort_values("annualrank")
    display_cols = [config.key_column, "emissions", "annualrank"]
    print(f"Top {config.top_n} in {config.year_filter}:")
    print(top_year[display_cols].to_string(index=False))

# %% [markdown]
# ---
# ## Step 6: Full time series for the top-N cohort
#
# The countries in the top N can change from year to year. To follow the top
# emitters of one year across *all* years, take the set of countries from that
# year's top N and keep every row of the tidy table whose `Party` is in the set.
# This is a filter: no columns are added.

# %%
if config.year_filter is not None:
    cohort = reference_set(top_year, config.key_column)
    ghg_cohort = filter_by_membership(ghg_tidy, cohort, config.key_column)
    print(f"{len(cohort)} countries x {n_years} years = {len(ghg_cohort)} rows")
else:
    ghg_cohort = ghg_top

# %% [markdown]
# ---
# ## Step 7: Plot
#
# One line per country. The plotting function only needs the three tidy
# columns; it does not care about row order.

# %%
fig, ax = plt.subplots(figsize=(12, 6))
plot_emissions_trends(
    ghg_cohort,
    ax=ax,
    title=top_n_title(config.top_n, config.year_filter),
)
plt.tight_layout()
plt.show()

# %% [markdown]
# ---
# ## Step 8: Left join with another table
#
# Real analyses combine sources, e.g. emissions with GDP. We make a fake GDP
# table (random numbers) for all but one of the cohort countries, then join it
# onto the cohort table.
#
# A **left join** keeps every row of the left table. The country without a
# GDP entry gets a missing value, not a dropped row. The GDP table must list
# each country once; otherwise the join would duplicate emissions rows, so the
# join refuses duplicate keys.

# %%
cohort_parties = sorted(reference_set(ghg_cohort, config.key_column))
fake_gdp = create_fake_gdp(cohort_parties[:-1], key_column=config.key_column)
fake_gdp

# %%
ghg_gdp = left_join(ghg_cohort, fake_gdp, on=config.key_column)
assert len(ghg_gdp) == len(ghg_cohort)

ghg_gdp[ghg_gdp["fakeGDP"].isna()].head()

# %% [markdown]
# ---
# ## Practice problem
#
# Pick your own set of countries (`country_allowlist` in the configuration),
# filter the tidy table to them, and plot their trends.
#
# Country names must match the `Party` column exactly. The cell below
# reports any name that is not in the data.

# %%
if config.country_allowlist is not None:
    missing_names = sorted(
        set(config.country_allowlist) - reference_set(ghg_tidy, config.key_column)
    )
    if missing_names:
        print(f"Not found in the data (check spelling): {missing_names}")

    ghg_practice = filter_by_membership(
        ghg_tidy, config.country_allowlist, config.key_column
    )

    fig, ax = plt.subplots(figsize=(12, 6))
    plot_emissions_trends(ghg_practice, ax=ax, title="Practice: my countries")
    plt.tight_layout()
    plt.show()

# %% [markdown]
# ---
# ## Bonus: country codes
#
# Party names vary between data sources ("United States of America" vs
# "United States"). Joining on ISO3 codes is more robust. Aggregates such as
# the European Union have no code and get `None`.

# %%
add_iso3c_column(ghg_projected[[config.key_column]], config.key_column)
