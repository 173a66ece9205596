#
# Copyright (c) 2023-2025 LateGenXer
#
# SPDX-License-Identifier: AGPL-3.0-or-later
#


import dataclasses
import typing

import pytest

from contextlib import nullcontext

from tax.uk import *


params_2425 = YEARS['2024/25']


def test_years() -> None:
    assert TAX_YEARS == ('2024/25', '2023/24', '2022/23', '2021/22', '2020/21', '2019/20')
    assert list(YEARS) == sorted(TAX_YEARS)
    for key, params in YEARS.items():
        assert params.year == key


def test_years_immutable() -> None:
    with pytest.raises(TypeError):
        YEARS['2025/26'] = params_2425  # type: ignore[index]
    with pytest.raises(dataclasses.FrozenInstanceError):
        params_2425.ni_main_rate = 0.12  # type: ignore[misc]


def test_notes() -> None:
    assert YEARS['2022/23'].notes
    assert YEARS['2023/24'].notes
    for year in ('2019/20', '2020/21', '2021/22', '2024/25'):
        assert YEARS[year].notes == ()


@pytest.mark.parametrize("year", ['2024/25', TaxYear(2024, 2025)])
def test_lookup(year) -> None:
    assert lookup(year) is params_2425


@pytest.mark.parametrize("year", ['2018/19', '2025/26', '2024/2025', '', TaxYear(2030, 2031)])
def test_lookup_unsupported(year) -> None:
    with pytest.raises(UnsupportedTaxYear):
        lookup(year)
    with pytest.raises(KeyError):
        lookup(year)


# gross, personal_allowance
personal_allowance_test_cases = [
    (-500, 12570),
    (0, 12570),
    (50000, 12570),
    (100000, 12570),
    (100001, 12569.5),
    (110000, 7570),
    (125138, 1),
    (125140, 0),
    (200000, 0),
]


@pytest.mark.parametrize("gross,pa", personal_allowance_test_cases)
def test_personal_allowance(gross:float, pa:float) -> None:
    assert personal_allowance(params_2425, gross) == pytest.approx(pa)


def test_personal_allowance_2019() -> None:
    params = YEARS['2019/20']
    assert personal_allowance(params, 112500) == pytest.approx(6250)
    assert personal_allowance(params, 125000) == 0


def test_personal_allowance_clamped() -> None:
    # Taper end beyond where the allowance runs out
    params = dataclasses.replace(params_2425, taper_end=200000)
    assert personal_allowance(params, 150000) == 0
    assert personal_allowance(params, 199999) == 0


# taxable, income_tax
income_tax_test_cases = [
    (-1, 0),
    (0, 0),
    (1, 0.20),
    (37430, 7486.00),
    (37700, 7540.00),
    (37701, 7540.40),
    (102430, 33432.00),
    (125140, 7540 + (125140 - 37700)*0.40),
    (125141, 7540 + (125140 - 37700)*0.40 + 0.45),
]


@pytest.mark.parametrize("taxable,tax", income_tax_test_cases)
def test_income_tax(taxable:float, tax:float) -> None:
    assert income_tax(params_2425, taxable) == pytest.approx(tax, abs=1e-6)


def test_income_tax_additional_threshold_150k() -> None:
    params = YEARS['2022/23']
    assert income_tax(params, 150000) == pytest.approx(37700*0.20 + (150000 - 37700)*0.40)
    assert income_tax(params, 150100) == pytest.approx(37700*0.20 + (150000 - 37700)*0.40 + 100*0.45)


def test_income_tax_empty_higher_band() -> None:
    params = dataclasses.replace(params_2425, higher_threshold_taxable=30000)
    # No 40% band; 45% applies above the threshold on top of the basic band
    assert income_tax(params, 40000) == pytest.approx(37700*0.20 + 10000*0.45)


# gross, ni
employee_ni_test_cases = [
    (-500, 0),
    (0, 0),
    (12570, 0),
    (12571, 0.08),
    (50000, 2994.40),
    (50270, 3016.00),
    (110000, 4210.60),
]


@pytest.mark.parametrize("gross,ni", employee_ni_test_cases)
def test_employee_ni(gross:float, ni:float) -> None:
    assert employee_ni(params_2425, gross) == pytest.approx(ni, abs=1e-6)


def test_employee_ni_2022() -> None:
    params = YEARS['2022/23']
    assert employee_ni(params, 60000) == pytest.approx((50270 - 12570)*0.1325 + (60000 - 50270)*0.0325)


@pytest.mark.parametrize("year", TAX_YEARS)
def test_monotonic(year:str) -> None:
    params = YEARS[year]
    prev_tax = prev_ni = 0.0
    for gross in range(0, 300001, 250):
        pa = personal_allowance(params, gross)
        assert 0 <= pa <= params.personal_allowance_full
        tax = income_tax(params, max(gross - pa, 0))
        ni = employee_ni(params, gross)
        assert tax >= prev_tax
        assert ni >= prev_ni
        prev_tax, prev_ni = tax, ni


str_to_tax_year_params = [
    ("2023/2024", nullcontext(TaxYear(2023, 2024))),
    ("2023/24",   nullcontext(TaxYear(2023, 2024))),
    ("23/2024",   nullcontext(TaxYear(2023, 2024))),
    ("23/24",     nullcontext(TaxYear(2023, 2024))),
    ("2024",      nullcontext(TaxYear(2023, 2024))),
    ("24",        nullcontext(TaxYear(2023, 2024))),
    ("00",        nullcontext(TaxYear(1999, 2000))),
    ("0",         pytest.raises(ValueError)),
    ("10000",     pytest.raises(ValueError)),
    ("XX/YY",     pytest.raises(ValueError)),
    ("YY",        pytest.raises(ValueError)),
    ("2023/2025", pytest.raises(ValueError)),
]

@pytest.mark.parametrize("s,eyc", [pytest.param(s, eyc, id=s) for s, eyc in str_to_tax_year_params])
def test_str_to_tax_year(s:str, eyc:typing.ContextManager) -> None:
    with eyc as ey:
        assert TaxYear.from_string(s) == ey


@pytest.mark.parametrize("year", TAX_YEARS)
def test_tax_year_str(year:str) -> None:
    assert str(TaxYear.from_string(year)) == year
