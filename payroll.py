#!/usr/bin/env python3
#
# Copyright (c) 2025 LateGenXer
#
# SPDX-License-Identifier: AGPL-3.0-or-later
#

#
# UK take-home pay estimator: PAYE income tax plus employee Class 1 NI on an
# annual salary, for England/Wales/NI bands.
#


import argparse
import dataclasses
import logging
import re
import sys

from tax.uk import TAX_YEARS, TaxYear, UnsupportedTaxYear, lookup, personal_allowance, income_tax, employee_ni
from environ import configure_logging, get_version
from report import Report, TextReport, HtmlReport


logger = logging.getLogger('payroll')


@dataclasses.dataclass(frozen=True)
class PayrollResult:
    year: str
    gross_annual: float
    personal_allowance: float
    taxable_annual: float
    income_tax_annual: float
    ni_annual: float
    net_annual: float
    net_monthly: float
    take_home_pct: float
    notes: tuple[str, ...] = ()

    def summary(self) -> list[list]:
        return [
            ['Gross (annual)',              format_gbp(self.gross_annual)],
            ['Income tax (annual)',         format_gbp(self.income_tax_annual)],
            ['National Insurance (annual)', format_gbp(self.ni_annual)],
            ['Net pay (annual)',            format_gbp(self.net_annual)],
            ['Net pay (monthly)',           format_gbp(self.net_monthly)],
            ['Take-home',                   f'{self.take_home_pct:.1f}%'],
        ]

    def details(self) -> list[list]:
        return [
            ['Personal allowance', format_gbp(self.personal_allowance)],
            ['Taxable income',     format_gbp(self.taxable_annual)],
        ]

    def write(self, report:Report) -> None:
        report.start(f'UK Payroll {self.year}')

        report.write_heading('Summary')
        report.write_table(self.summary(), just='lr')

        report.write_heading('Details')
        report.write_table(self.details(), just='lr')

        if self.notes:
            report.write_heading('Notes')
            for note in self.notes:
                report.write_paragraph(note)

        report.end()


def payroll_from_annual_salary(year:'str|TaxYear', gross_annual:float) -> PayrollResult:
    params = lookup(year)
    gross = max(gross_annual, 0)

    pa = personal_allowance(params, gross)
    taxable = max(gross - pa, 0)

    tax = income_tax(params, taxable)
    ni = employee_ni(params, gross)

    net = max(gross - tax - ni, 0)
    net_monthly = net / 12

    take_home_pct = net / gross * 100 if gross > 0 else 0

    logger.debug('%s: gross=%.2f allowance=%.2f taxable=%.2f tax=%.2f ni=%.2f net=%.2f',
                 params.year, gross, pa, taxable, tax, ni, net)

    return PayrollResult(
        year=params.year,
        gross_annual=gross,
        personal_allowance=pa,
        taxable_annual=taxable,
        income_tax_annual=tax,
        ni_annual=ni,
        net_annual=net,
        net_monthly=net_monthly,
        take_home_pct=take_home_pct,
        notes=params.notes,
    )


_non_numeric_re = re.compile(r'[^0-9.]')


# Accepts "50,000", "£50000", etc.
def parse_money(text:str) -> float:
    cleaned = _non_numeric_re.sub('', text)
    try:
        return float(cleaned)
    except ValueError:
        return 0.0


def format_gbp(amount:float) -> str:
    sign = '-' if amount < 0 else ''
    return f'{sign}£{abs(amount):,.2f}'


def main():
    configure_logging()

    argparser = argparse.ArgumentParser(description='Estimate UK take-home pay from an annual salary.')
    argparser.add_argument('-y', '--tax-year', metavar='TAX_YEAR', default=TAX_YEARS[0], help=f'tax year in XXXX/YY, XXXX/YYYY, XX/YY, YYYY, or YY format (default: {TAX_YEARS[0]})')
    argparser.add_argument('--format', choices=['text', 'html'], default='text')
    argparser.add_argument('--version', action='version', version=get_version())
    argparser.add_argument('salary', metavar='SALARY', help='gross annual salary, e.g. 50000 or £50,000')
    args = argparser.parse_args()

    try:
        tax_year = TaxYear.from_string(args.tax_year)
        result = payroll_from_annual_salary(tax_year, parse_money(args.salary))
    except ValueError as e:
        argparser.error(f'invalid tax year {args.tax_year!r}: {e}')
    except UnsupportedTaxYear as e:
        argparser.error(e.args[0])

    stream = sys.stdout
    report: Report
    if args.format == 'text':
        report = TextReport(stream)
    else:
        assert args.format == 'html'
        report = HtmlReport(stream)
    result.write(report)


if __name__ == '__main__':
    main()
