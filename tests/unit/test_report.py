"""Unit tests for the plain-text simulation report"""

import re
from datetime import date

import pytest

from atlantique_loans.domain.exceptions import InvalidInputError, UnsupportedCurrencyError
from atlantique_loans.domain.report import french_long_date, render_loan_report, report_filename

GENERATED_ON = date(2026, 10, 19)


@pytest.fixture
def report() -> str:
    return render_loan_report(10000, 5.5, 24, "EUR", GENERATED_ON)


def test_french_long_date():
    assert french_long_date(GENERATED_ON) == "lundi 19 octobre 2026"
    assert french_long_date(date(2025, 8, 3)) == "dimanche 3 août 2025"


def test_report_header_and_date(report):
    assert "RAPPORT DE SIMULATION DE PRÊT" in report
    assert "Date de génération : lundi 19 octobre 2026" in report


def test_report_parameters(report):
    assert "Montant du prêt         : 10 000,00 €" in report
    assert "Taux d'intérêt annuel   : 5.5%" in report
    assert "Durée                   : 24 mois (2 années)" in report
    assert "Devise                  : EUR" in report


def test_report_results_and_summary(report):
    assert "Mensualité              : 440,96 €" in report
    assert "Montant total à rembourser : 10 583,04 €" in report
    assert "Coût total du crédit    : 583,04 €" in report
    assert "Pourcentage d'intérêts  : 6%" in report


def test_report_lists_every_month(report):
    rows = [line for line in report.splitlines() if re.match(r"^\s*\d+ \|", line)]
    assert len(rows) == 24
    assert rows[0] == "   1 |      440,96 € |      395,12 € |       45,83 € |    9 604,88 €"
    assert rows[-1].startswith("  24 |")
    assert rows[-1].endswith("0,00 €")


def test_report_in_other_currency():
    text = render_loan_report(10000, 5.5, 24, "FCFA", GENERATED_ON)
    assert "Mensualité              : 440,96 F CFA" in text
    assert "Devise                  : FCFA" in text


def test_report_rejects_bad_input():
    with pytest.raises(UnsupportedCurrencyError):
        render_loan_report(10000, 5.5, 24, "GBP", GENERATED_ON)
    with pytest.raises(InvalidInputError):
        render_loan_report(0, 5.5, 24, "EUR", GENERATED_ON)


def test_report_filename():
    assert report_filename(10000, "EUR", 24, GENERATED_ON) == "simulation_pret_10000_EUR_24mois_2026-10-19.txt"
    assert report_filename("2500.50", "xof", 6, GENERATED_ON) == "simulation_pret_2500.5_FCFA_6mois_2026-10-19.txt"
