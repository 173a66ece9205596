#
# Copyright (c) 2025 LateGenXer
#
# SPDX-License-Identifier: AGPL-3.0-or-later
#


import dataclasses

import altair as alt
import numpy as np
import pandas as pd
import streamlit as st

import common

from payroll import payroll_from_annual_salary
from tax.uk import TAX_YEARS, YEARS


common.set_page_config(
    page_title="Tax Years",
    layout="wide",
)

st.title('Tax Years')


#
# Parameters table
#

rows = []
for year in TAX_YEARS:
    params = dataclasses.asdict(YEARS[year])
    params['notes'] = ' '.join(params['notes'])
    params['ni_main_rate'] *= 100.0
    params['ni_additional_rate'] *= 100.0
    rows.append(params)

df = pd.DataFrame(rows)

st.dataframe(
    df,
    width='stretch',
    hide_index=True,
    column_config={
        "year": st.column_config.TextColumn(label="Tax year"),
        "personal_allowance_full": st.column_config.NumberColumn(label="Personal allowance", format="£%d"),
        "taper_start": st.column_config.NumberColumn(label="Taper start", format="£%d"),
        "taper_end": st.column_config.NumberColumn(label="Taper end", format="£%d"),
        "basic_band_taxable": st.column_config.NumberColumn(label="Basic band", format="£%d"),
        "higher_threshold_taxable": st.column_config.NumberColumn(label="Additional rate threshold", format="£%d"),
        "ni_primary_threshold": st.column_config.NumberColumn(label="NI PT", format="£%d"),
        "ni_upper_earnings_limit": st.column_config.NumberColumn(label="NI UEL", format="£%d"),
        "ni_main_rate": st.column_config.NumberColumn(label="NI main rate", format="%.2f%%"),
        "ni_additional_rate": st.column_config.NumberColumn(label="NI additional rate", format="%.2f%%"),
        "notes": st.column_config.TextColumn(label="Notes", width="large"),
    },
)


#
# Take-home chart
#

max_salary = st.slider('Maximum salary (£):', min_value=20000, max_value=300000, value=150000, step=10000, key='max_salary')


@st.cache_data
def take_home_sweep(max_salary:int, points:int=301) -> pd.DataFrame:
    data = []
    for gross in np.linspace(0, max_salary, points):
        for year in TAX_YEARS:
            result = payroll_from_annual_salary(year, float(gross))
            data.append((year, result.gross_annual, result.net_annual, result.take_home_pct))
    return pd.DataFrame(data, columns=['Year', 'Gross', 'Net', 'TakeHome'])


sweep = take_home_sweep(max_salary)

chart = (
    alt.Chart(sweep)
    .mark_line()
    .encode(
        alt.X('Gross:Q', axis=alt.Axis(format=',.0f', title='Gross salary (£)')),
        alt.Y('TakeHome:Q', scale=alt.Scale(zero=False), axis=alt.Axis(format='.0f', title='Take-home (%)')),
        alt.Color('Year:N', sort=list(TAX_YEARS)),
        tooltip=[
            alt.Tooltip('Year:N'),
            alt.Tooltip('Gross:Q', format=',.0f'),
            alt.Tooltip('Net:Q', format=',.2f'),
            alt.Tooltip('TakeHome:Q', format='.1f'),
        ],
    )
)
st.altair_chart(chart, width='stretch')


common.footer()
common.analytics_html()
