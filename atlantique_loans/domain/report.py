"""Plain-text loan simulation report offered as a download"""

from datetime import date
from decimal import Decimal
from typing import List

from atlantique_loans.domain.amortization import generate_amortization_schedule, summarize_loan
from atlantique_loans.domain.currency import CurrencyLike, format_currency, parse_currency
from atlantique_loans.domain.money import Number, to_decimal, wide_context

RULE = "═" * 59

_WEEKDAYS = ["lundi", "mardi", "mercredi", "jeudi", "vendredi", "samedi", "dimanche"]
_MONTHS = [
    "janvier", "février", "mars", "avril", "mai", "juin",
    "juillet", "août", "septembre", "octobre", "novembre", "décembre",
]


def french_long_date(day: date) -> str:
    """date(2026, 10, 19) -> "lundi 19 octobre 2026" """
    return f"{_WEEKDAYS[day.weekday()]} {day.day} {_MONTHS[day.month - 1]} {day.year}"


def _plain(value: Decimal) -> str:
    # Decimal("1E+4") -> "10000"
    with wide_context(len(value.as_tuple().digits)):
        return format(value.normalize(), "f")


def _section(title: str) -> List[str]:
    return ["", f"{title} :", RULE]


def render_loan_report(
    principal: Number,
    annual_rate_percent: Number,
    term_months: int,
    currency: CurrencyLike,
    generated_on: date,
) -> str:
    """
    Build the simulation report: parameters, results, the full schedule and
    a financial summary, followed by the usual disclaimers.

    Raises:
        InvalidInputError: Invalid loan terms
        UnsupportedCurrencyError: Unknown currency code
    """
    code = parse_currency(currency)
    summary = summarize_loan(principal, annual_rate_percent, term_months)
    schedule = generate_amortization_schedule(principal, annual_rate_percent, term_months)
    terms = summary.terms

    def money(value: Number) -> str:
        return format_currency(value, code)

    lines = [
        RULE,
        "RAPPORT DE SIMULATION DE PRÊT".center(59).rstrip(),
        "BANQUE ATLANTIQUE".center(59).rstrip(),
        RULE,
        "",
        f"Date de génération : {french_long_date(generated_on)}",
    ]

    lines += _section("PARAMÈTRES DU PRÊT")
    lines += [
        f"Montant du prêt         : {money(terms.principal)}",
        f"Taux d'intérêt annuel   : {_plain(terms.annual_rate_percent)}%",
        f"Durée                   : {terms.term_months} mois ({_plain(summary.term_years)} années)",
        f"Devise                  : {code.value}",
    ]

    lines += _section("RÉSULTATS DE LA SIMULATION")
    lines += [
        f"Mensualité              : {money(summary.monthly_payment)}",
        f"Montant total à rembourser : {money(summary.total_payment)}",
        f"Coût total du crédit    : {money(summary.total_interest)}",
        f"Taux effectif global    : {_plain(terms.annual_rate_percent)}%",
    ]

    lines += _section("ÉCHÉANCIER D'AMORTISSEMENT")
    lines += [
        "Mois | Mensualité    | Capital       | Intérêts      | Solde Restant",
        "-----|---------------|---------------|---------------|---------------",
    ]
    for row in schedule:
        lines.append(
            f"{row.month:>4} | {money(row.payment):>13} | {money(row.principal_portion):>13} | "
            f"{money(row.interest_portion):>13} | {money(row.remaining_balance):>13}"
        )

    lines += _section("RÉSUMÉ FINANCIER")
    lines += [
        f"Capital emprunté        : {money(terms.principal)}",
        f"Intérêts totaux         : {money(summary.total_interest)}",
        f"Pourcentage d'intérêts  : {summary.interest_percentage}%",
    ]

    lines += _section("INFORMATIONS IMPORTANTES")
    lines += [
        "• Cette simulation est donnée à titre indicatif",
        "• Les conditions réelles peuvent varier selon votre profil",
        "• Contactez votre conseiller pour une étude personnalisée",
        "• Taux et conditions sous réserve d'acceptation du dossier",
        "",
        RULE,
        "BANQUE ATLANTIQUE".center(59).rstrip(),
        "Lomé, TOGO".center(59).rstrip(),
        RULE,
    ]

    return "\n".join(lines) + "\n"


def report_filename(
    principal: Number,
    currency: CurrencyLike,
    term_months: int,
    generated_on: date,
) -> str:
    """simulation_pret_10000_EUR_24mois_2026-10-19.txt"""
    code = parse_currency(currency)
    amount = _plain(to_decimal(principal, "principal"))
    return f"simulation_pret_{amount}_{code.value}_{term_months}mois_{generated_on.isoformat()}.txt"
