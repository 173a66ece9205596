"""UK income tax and employee National Insurance, per tax year."""


import dataclasses
import datetime
import types
import typing


# Income tax rates are unchanged across the supported years; only bands vary.
# https://www.gov.uk/government/publications/rates-and-allowances-income-tax/income-tax-rates-and-allowances-current-and-past
BASIC_RATE      = 0.20
HIGHER_RATE     = 0.40
ADDITIONAL_RATE = 0.45


TaxYearKey = typing.Literal[
    '2019/20',
    '2020/21',
    '2021/22',
    '2022/23',
    '2023/24',
    '2024/25',
]


class UnsupportedTaxYear(KeyError):
    pass


@dataclasses.dataclass(frozen=True)
class TaxYearParams:
    year: TaxYearKey

    # Personal allowance, tapered away between taper_start and taper_end
    personal_allowance_full: int
    taper_start: int
    taper_end: int

    # Income tax bands (England/Wales/NI), over taxable income
    basic_band_taxable: int
    higher_threshold_taxable: int

    # Employee Class 1 NI, approximate annualised thresholds
    ni_primary_threshold: int
    ni_upper_earnings_limit: int
    ni_main_rate: float
    ni_additional_rate: float

    notes: tuple[str, ...] = ()


# https://www.gov.uk/government/publications/rates-and-allowances-national-insurance-contributions/rates-and-allowances-national-insurance-contributions
_years = [
    TaxYearParams(
        year='2019/20',
        personal_allowance_full=12500,
        taper_start=100000,
        taper_end=125000,
        basic_band_taxable=37500,
        higher_threshold_taxable=150000,
        ni_primary_threshold=8632,      # ~£166/wk
        ni_upper_earnings_limit=50000,  # ~£962/wk
        ni_main_rate=0.12,
        ni_additional_rate=0.02,
    ),
    TaxYearParams(
        year='2020/21',
        personal_allowance_full=12500,
        taper_start=100000,
        taper_end=125000,
        basic_band_taxable=37500,
        higher_threshold_taxable=150000,
        ni_primary_threshold=9500,      # ~£183/wk
        ni_upper_earnings_limit=50000,
        ni_main_rate=0.12,
        ni_additional_rate=0.02,
    ),
    TaxYearParams(
        year='2021/22',
        personal_allowance_full=12570,
        taper_start=100000,
        taper_end=125140,
        basic_band_taxable=37700,
        higher_threshold_taxable=150000,
        ni_primary_threshold=9568,      # ~£184/wk
        ni_upper_earnings_limit=50270,  # ~£967/wk
        ni_main_rate=0.12,
        ni_additional_rate=0.02,
    ),
    # Health and Social Care Levy came and went mid-year, and the PT was
    # aligned with the PA from July 2022.  Blended rates for the whole year.
    TaxYearParams(
        year='2022/23',
        personal_allowance_full=12570,
        taper_start=100000,
        taper_end=125140,
        basic_band_taxable=37700,
        higher_threshold_taxable=150000,
        ni_primary_threshold=12570,
        ni_upper_earnings_limit=50270,
        ni_main_rate=0.1325,
        ni_additional_rate=0.0325,
        notes=('NI rates/thresholds changed mid-year in 2022/23; this is a simplified estimate.',),
    ),
    # Main rate went 12% -> 10% -> 8% during the year; 10% throughout.
    TaxYearParams(
        year='2023/24',
        personal_allowance_full=12570,
        taper_start=100000,
        taper_end=125140,
        basic_band_taxable=37700,
        higher_threshold_taxable=125140,
        ni_primary_threshold=12570,
        ni_upper_earnings_limit=50270,
        ni_main_rate=0.10,
        ni_additional_rate=0.02,
        notes=('NI main rate changed during 2023/24; this is a simplified estimate.',),
    ),
    TaxYearParams(
        year='2024/25',
        personal_allowance_full=12570,
        taper_start=100000,
        taper_end=125140,
        basic_band_taxable=37700,
        higher_threshold_taxable=125140,
        ni_primary_threshold=12570,
        ni_upper_earnings_limit=50270,
        ni_main_rate=0.08,
        ni_additional_rate=0.02,
    ),
]


YEARS: typing.Mapping[str, TaxYearParams] = types.MappingProxyType({p.year: p for p in _years})

# Newest first
TAX_YEARS: tuple[TaxYearKey, ...] = tuple(reversed(typing.get_args(TaxYearKey)))

assert set(YEARS) == set(TAX_YEARS)
for _p in YEARS.values():
    assert _p.personal_allowance_full >= 0
    assert _p.taper_start < _p.taper_end
    assert _p.ni_primary_threshold <= _p.ni_upper_earnings_limit
    assert 0 <= _p.ni_main_rate <= 1
    assert 0 <= _p.ni_additional_rate <= 1
del _p


def lookup(year:'str|TaxYear') -> TaxYearParams:
    key = str(year)
    try:
        return YEARS[key]
    except KeyError:
        raise UnsupportedTaxYear(f'no parameters for tax year {key!r}; available years: {", ".join(TAX_YEARS)}') from None


def _clamp(n:float, lo:float, hi:float) -> float:
    return max(lo, min(hi, n))


# https://www.gov.uk/income-tax-rates/income-over-100000
def personal_allowance(params:TaxYearParams, gross:float) -> float:
    gross = max(gross, 0)
    if gross <= params.taper_start:
        return params.personal_allowance_full
    if gross >= params.taper_end:
        return 0
    # £1 less for every £2 above the taper start
    reduction = (gross - params.taper_start) / 2
    return _clamp(params.personal_allowance_full - reduction, 0, params.personal_allowance_full)


def income_tax(params:TaxYearParams, taxable:float) -> float:
    taxable = max(taxable, 0)

    basic_rate_income = min(taxable, params.basic_band_taxable)

    higher_rate_band = max(params.higher_threshold_taxable - params.basic_band_taxable, 0)
    higher_rate_income = min(max(taxable - params.basic_band_taxable, 0), higher_rate_band)

    additional_rate_income = max(taxable - params.higher_threshold_taxable, 0)

    tax  = basic_rate_income      * BASIC_RATE
    tax += higher_rate_income     * HIGHER_RATE
    tax += additional_rate_income * ADDITIONAL_RATE
    return tax


# https://www.gov.uk/national-insurance-rates-letters
def employee_ni(params:TaxYearParams, gross:float) -> float:
    gross = max(gross, 0)
    main_rate_earnings = max(min(gross, params.ni_upper_earnings_limit) - params.ni_primary_threshold, 0)
    additional_rate_earnings = max(gross - params.ni_upper_earnings_limit, 0)
    return main_rate_earnings * params.ni_main_rate + additional_rate_earnings * params.ni_additional_rate


class TaxYear(typing.NamedTuple):

    year1: int
    year2: int

    def __str__(self) -> str:
        return f'{self.year1}/{self.year2 % 100:02d}'

    @staticmethod
    def _str_to_year(s:str) -> int:
        assert isinstance(s, str)
        if not s.isdigit():
            raise ValueError(s)
        y = int(s)
        if len(s) == 2:
            y += 2000
        if y < datetime.MINYEAR or y > datetime.MAXYEAR:
            raise ValueError(f'{s} out of range')
        return y

    @classmethod
    def from_string(cls, s:str) -> 'TaxYear':
        try:
            s1, s2 = s.split('/', maxsplit=1)
        except ValueError:
            y2 = cls._str_to_year(s)
            y1 = y2 - 1
        else:
            y1 = cls._str_to_year(s1)
            y2 = cls._str_to_year(s2)
            if y1 + 1 != y2:
                raise ValueError(f'{s1} and {s2} are not consecutive years')
        return cls(y1, y2)
