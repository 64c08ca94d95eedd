"""Declarative table of supported payout countries.

Each entry describes the bank account grammar of one country. The table is
read once by the registry at import time; nothing here is mutated later.
"""
from __future__ import annotations

from typing import Dict, List, Optional

from payout_rules.domain.accounts.grammar import (
    ANY,
    NOT_USED,
    FieldGrammar,
    digits,
    iban,
    optional,
    pattern,
    swift,
)
from payout_rules.domain.accounts.routing import (
    NO_ROUTING,
    RoutingRule,
    concatenation,
    echo,
    hyphenated,
)
from payout_rules.domain.accounts.variant import CountryRule
from payout_rules.shared.enums import BankField, MaskingPolicy

EUROPEAN_ACCOUNT_TYPE = "EU"

# Країни, де виплати йдуть через cross-border payouts
CROSS_BORDER_PAYOUT_COUNTRIES = frozenset({
    "TH", "KR", "IL", "TT", "PH", "MX", "AR", "PE", "AL", "BH", "AZ", "AO", "NE",
    "SM", "NG", "JO", "IN", "BA", "VN", "TW", "AG", "TZ", "NA", "ID", "CR", "CL",
    "BW", "PK", "TR", "MA", "RS", "ZA", "ET", "BN", "GY", "GT", "KE", "EG", "CO",
    "SA", "RW", "KZ", "EC", "MY", "UY", "MU", "JM", "OM", "BD", "BT", "LA", "MZ",
    "DO", "UZ", "BO", "TN", "MD", "MK", "PA", "SV", "MG", "PY", "GH", "AM", "LK",
    "KW", "IS", "QA", "BS", "LC", "SN", "KH", "MN", "GA", "MC", "DZ", "MO", "BJ",
    "CI",
})

# Minimum cross-border payout, in the smallest unit of the local currency
MIN_CROSS_BORDER_PAYOUT_LOCAL_CENTS: Dict[str, int] = {
    "TH": 600_00,
    "KR": 40_000_00,
    "NA": 5_50,
    "PH": 20_00,
    "MX": 10_00,
    "BO": 2_00,
    "UZ": 3_430_00,
    "GY": 6_300_00,
    "KH": 1_230_00,
    "MN": 1_050_00,
    "AO": 150_00,
    "AR": 46_00,
    "BT": 25_00,
    "LA": 5_160_00,
    "MZ": 17_00,
    "CL": 230_00,
    "OM": 1,
    "AL": 30_00,
    "AZ": 50,
    "PY": 2_100_00,
    "GA": 1_00,
    "DZ": 1,
    "RW": 1_00,
    "TW": 8_00,
    "AM": 121_00,
}

_ROUTING_LABELS = {
    "US": "Routing number",
    "CA": "Transit and institution #",
    "AU": "BSB",
    "GB": "Sort code",
    "IN": "IFSC",
    "HK": "Clearing and branch code",
    "PH": "Bank Identifier Code (BIC)",
}
BANK_AND_BRANCH_CODE_COUNTRIES = frozenset({"AZ", "SG", "JP", "DO", "UZ", "LK", "TT", "JM"})
BANK_CODE_COUNTRIES = frozenset({"BD", "BO", "CL", "CO", "GH", "ID", "KR", "PY", "TH", "UY", "VN"})


def _routing_label(country_code: str, bank_code: FieldGrammar) -> Optional[str]:
    if country_code in _ROUTING_LABELS:
        return _ROUTING_LABELS[country_code]
    if country_code in BANK_AND_BRANCH_CODE_COUNTRIES:
        return "Bank and branch code"
    if country_code in BANK_CODE_COUNTRIES:
        return "Bank code"
    if bank_code.used:
        return "SWIFT / BIC code"
    return None


def _rule(
    country_code: str,
    currency: str,
    *,
    bank: FieldGrammar = NOT_USED,
    branch: FieldGrammar = NOT_USED,
    account: FieldGrammar = ANY,
    routing: Optional[RoutingRule] = None,
    masking: MaskingPolicy = MaskingPolicy.BARE,
    bank_account_type: str = "",
    aliases: Optional[Dict[str, BankField]] = None,
    accepts_account_type: bool = False,
    sends_holder_name: bool = False,
) -> CountryRule:
    if routing is None:
        # Якщо є код банку, він і є routing number
        routing = echo() if bank.used else NO_ROUTING
    return CountryRule(
        country_code=country_code,
        currency=currency,
        bank_code=bank,
        branch_code=branch,
        account_number=account,
        routing=routing,
        masking=masking,
        bank_account_type=bank_account_type,
        routing_label=_routing_label(country_code, bank),
        field_aliases=tuple((aliases or {}).items()),
        accepts_account_type=accepts_account_type,
        sends_holder_name=sends_holder_name,
        cross_border=country_code in CROSS_BORDER_PAYOUT_COUNTRIES,
        min_payout_local_cents=MIN_CROSS_BORDER_PAYOUT_LOCAL_CENTS.get(country_code, 0),
    )


def _iban_rule(country_code: str, currency: str, length: int, *, bank: FieldGrammar = NOT_USED,
               bank_account_type: str = "") -> CountryRule:
    """Country whose account number is an IBAN; shown as "CC******1234"."""
    return _rule(
        country_code,
        currency,
        bank=bank,
        account=iban(country_code, length),
        masking=MaskingPolicy.PREFIXED,
        bank_account_type=bank_account_type,
    )


_ALPHANUMERIC_ACCOUNT = pattern(
    "[0-9A-Z]{1,32}", "must be up to 32 digits or upper-case letters", min_length=1, max_length=32
)

_DOMESTIC_RULES: List[CountryRule] = [
    _rule(
        "US", "usd",
        bank=digits(9), account=digits(1, 17),
        bank_account_type="ACH",
        aliases={"routing_number": BankField.BANK_CODE},
    ),
    _rule(
        "CA", "cad",
        bank=digits(3), branch=digits(5), account=digits(1, 12),
        # transit-institution, e.g. "11000-000"
        routing=hyphenated(BankField.BRANCH_CODE, BankField.BANK_CODE),
        aliases={"transit_number": BankField.BRANCH_CODE, "institution_number": BankField.BANK_CODE},
    ),
    _rule(
        "AU", "aud",
        bank=digits(6), account=digits(5, 9),
        aliases={"bsb_number": BankField.BANK_CODE},
    ),
    _rule(
        "GB", "gbp",
        bank=pattern(
            # "231470" or "23-14-70", never partly hyphenated
            "[0-9]{6}|[0-9]{2}-[0-9]{2}-[0-9]{2}",
            "must be a 6 digit sort code",
            min_length=6,
            max_length=8,
        ),
        account=digits(8),
        bank_account_type="UK",
        aliases={"sort_code": BankField.BANK_CODE},
    ),
    _rule(
        "HK", "hkd",
        bank=digits(3), branch=digits(3), account=digits(6, 12),
        routing=hyphenated(),
        aliases={"clearing_code": BankField.BANK_CODE},
    ),
    _rule("SG", "sgd", bank=digits(4), branch=digits(3), account=digits(6, 12), routing=hyphenated()),
    _rule(
        "JP", "jpy",
        bank=digits(4), branch=digits(3), account=digits(4, 8),
        routing=concatenation(),
        sends_holder_name=True,
    ),
    _rule("NZ", "nzd", account=digits(15, 16)),
    _rule(
        "IN", "inr",
        bank=pattern(
            "[A-Z]{4}0[A-Z0-9]{6}", "must be a valid IFSC code", min_length=11, max_length=11
        ),
        account=digits(8, 18),
        aliases={"ifsc": BankField.BANK_CODE},
    ),
    _rule("TH", "thb", bank=digits(3), account=digits(6, 15)),
    _rule("KR", "krw", bank=swift("KR"), account=digits(11, 16)),
    _rule(
        "TT", "ttd",
        bank=digits(3), branch=digits(5), account=digits(1, 17),
        routing=concatenation(),
    ),
    # Philippine BICs are not restricted to the PH country part
    _rule("PH", "php", bank=swift(), account=digits(1, 17)),
    _rule("NA", "nad", bank=swift("NA"), account=digits(8, 13)),
    _rule("TZ", "tzs", bank=swift("TZ"), account=digits(10, 14)),
    _rule("AG", "xcd", bank=swift("AG"), account=_ALPHANUMERIC_ACCOUNT),
    _rule("NG", "ngn", bank=swift("NG"), account=digits(10)),
    _rule("BD", "bdt", bank=digits(9), account=digits(13, 17)),
    _rule("BT", "btn", bank=swift("BT"), account=digits(1, 17)),
    _rule("LA", "lak", bank=swift("LA"), account=digits(12, 18)),
    _rule("MZ", "mzn", bank=swift("MZ"), account=digits(21)),
    _rule("AR", "ars", account=digits(22)),
    _rule(
        "BW", "bwp",
        bank=swift("BW"),
        account=pattern(
            "[0-9A-Z]{1,16}", "must be up to 16 digits or upper-case letters", min_length=1, max_length=16
        ),
    ),
    _rule("PE", "pen", account=digits(20)),
    _rule("VN", "vnd", bank=digits(8), account=digits(1, 17), sends_holder_name=True),
    _rule("TW", "twd", bank=swift("TW"), account=digits(10, 14)),
    _rule("ID", "idr", bank=digits(3, 4), account=digits(1, 35), sends_holder_name=True),
    _rule("CL", "clp", bank=digits(3), account=digits(5, 25), accepts_account_type=True),
    _rule("RW", "rwf", bank=swift("RW"), account=digits(1, 15)),
    _rule("MO", "mop", bank=swift("MO"), account=digits(1, 19)),
    _rule("ZA", "zar", bank=swift("ZA"), account=digits(1, 17)),
    _rule("KE", "kes", bank=swift("KE"), account=digits(1, 32)),
    _rule("CO", "cop", bank=digits(3), account=digits(1, 20), accepts_account_type=True),
    _rule("ET", "etb", bank=swift("ET"), account=digits(13, 16)),
    _rule("BN", "bnd", bank=swift("BN"), account=digits(1, 32)),
    _rule("GY", "gyd", bank=swift("GY"), account=digits(1, 32)),
    _rule("EC", "usd", bank=swift("EC"), account=digits(5, 18)),
    _rule("MY", "myr", bank=swift("MY"), account=digits(5, 17)),
    _rule("UY", "uyu", bank=digits(3), account=digits(1, 12)),
    _rule("JM", "jmd", bank=digits(3), branch=digits(5), account=digits(1, 18), routing=hyphenated()),
    _rule("OM", "omr", bank=swift("OM"), account=digits(6, 16)),
    _rule(
        "DO", "dop",
        bank=digits(3), branch=optional(digits(1, 5)), account=digits(1, 28),
        routing=hyphenated(second_optional=True),
    ),
    _rule("UZ", "uzs", bank=swift("UZ"), branch=digits(5), account=digits(20), routing=hyphenated()),
    _rule("BO", "bob", bank=digits(3), account=digits(10, 15)),
    _rule("PA", "usd", bank=swift("PA"), account=digits(1, 18)),
    _rule("PY", "pyg", bank=digits(1, 2), account=digits(1, 16)),
    _rule("GH", "ghs", bank=digits(6), account=digits(8, 20)),
    _rule("AM", "amd", bank=swift("AM"), account=digits(11, 16)),
    _rule("LK", "lkr", bank=swift("LK"), branch=digits(7), account=digits(10, 18), routing=hyphenated()),
    _rule("BS", "bsd", bank=swift("BS"), account=digits(1, 10)),
    _rule("LC", "xcd", bank=swift("LC"), account=_ALPHANUMERIC_ACCOUNT),
    _rule("KH", "khr", bank=swift("KH"), account=digits(5, 15)),
    _rule("MN", "mnt", bank=swift("MN"), account=digits(5, 20)),
    _rule("GA", "xaf", bank=swift("GA"), account=digits(23)),
    _rule("DZ", "dzd", bank=swift("DZ"), account=digits(20)),
    _rule("MX", "mxn", account=digits(18)),
]

# (country, currency, IBAN length): no bank code, no routing number
_IBAN_ONLY: List[tuple] = [
    ("CH", "chf", 21),
    ("PL", "pln", 28),
    ("CZ", "czk", 24),
    ("BG", "bgn", 22),
    ("DK", "dkk", 18),
    ("HU", "huf", 28),
    ("AE", "aed", 23),
    ("IL", "ils", 23),
    ("RO", "ron", 24),
    ("SE", "sek", 24),
    ("NO", "nok", 15),
    ("LI", "chf", 21),
    ("CR", "crc", 22),
    ("GI", "gbp", 23),
    ("TN", "tnd", 24),
    ("MC", "eur", 27),
    ("NE", "xof", 28),
    ("SN", "xof", 28),
    ("IS", "eur", 26),
    ("BJ", "xof", 28),
    ("CI", "xof", 28),
]

# (country, currency, IBAN length): SWIFT code in bank_code is the routing number
_IBAN_WITH_SWIFT: List[tuple] = [
    ("BA", "bam", 20),
    ("AL", "all", 28),
    ("BH", "bhd", 22),
    ("JO", "jod", 30),
    ("PK", "pkr", 24),
    ("TR", "try", 26),
    ("MA", "mad", 28),
    ("AO", "aoa", 25),
    ("SM", "eur", 27),
    ("EG", "egp", 29),
    ("GT", "gtq", 28),
    ("SA", "sar", 24),
    ("KZ", "kzt", 20),
    ("MU", "mur", 30),
    ("MK", "mkd", 19),
    ("MD", "mdl", 24),
    ("SV", "usd", 28),
    ("MG", "mga", 27),
    ("KW", "kwd", 30),
    ("QA", "qar", 29),
]

# Єврозона: спільний тип рахунку "EU", валюта eur, (country, IBAN length)
_EUROZONE: List[tuple] = [
    ("AT", 20), ("BE", 16), ("HR", 21), ("CY", 28), ("EE", 20),
    ("FI", 18), ("FR", 27), ("DE", 22), ("GR", 27), ("IE", 22),
    ("IT", 27), ("LV", 21), ("LT", 20), ("LU", 20), ("MT", 31),
    ("NL", 18), ("PT", 25), ("SK", 24), ("SI", 19), ("ES", 24),
]


def build_country_rules() -> List[CountryRule]:
    """Return a fresh list with one rule per supported country."""
    rules: List[CountryRule] = list(_DOMESTIC_RULES)
    rules.extend(_iban_rule(code, currency, length) for code, currency, length in _IBAN_ONLY)
    rules.extend(
        _iban_rule(code, currency, length, bank=swift(code))
        for code, currency, length in _IBAN_WITH_SWIFT
    )
    # Serbian accounts may be held with banks whose SWIFT code is not RS
    rules.append(_iban_rule("RS", "rsd", 22, bank=swift()))
    rules.append(
        _rule(
            "AZ", "azn",
            bank=digits(6), branch=digits(6), account=iban("AZ", 28),
            routing=hyphenated(),
            masking=MaskingPolicy.PREFIXED,
        )
    )
    rules.extend(
        _iban_rule(code, "eur", length, bank_account_type=EUROPEAN_ACCOUNT_TYPE)
        for code, length in _EUROZONE
    )
    return rules
