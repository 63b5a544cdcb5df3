"""Dotted key names used by producers to read the data store."""

from __future__ import annotations

from typing import Final

__all__ = [
    "PersonKeys",
    "AddressKeys",
    "CompanyKeys",
    "TextKeys",
    "PaymentKeys",
    "NetKeys",
]


class PersonKeys:
    MALE_FIRST_NAMES: Final = "person.male_first_names"
    FEMALE_FIRST_NAMES: Final = "person.female_first_names"
    LAST_NAMES: Final = "person.last_names"
    SEX_WEIGHTS: Final = "person.sex_weights"
    MIDDLE_NAME_PROBABILITY: Final = "person.middle_name_probability"
    FREE_EMAIL_DOMAINS: Final = "person.free_email_domains"
    TELEPHONE_FORMATS: Final = "person.telephone_formats"
    PASSPORT_FORMAT: Final = "person.passport_format"
    PASSWORD_LENGTH: Final = "person.password_length"


class AddressKeys:
    STREETS: Final = "address.streets"
    CITIES: Final = "address.cities"
    POSTAL_CODE_FORMAT: Final = "address.postal_code_format"
    STREET_NUMBER_MAX: Final = "address.street_number_max"
    APARTMENT_NUMBER_MAX: Final = "address.apartment_number_max"
    APARTMENT_PROBABILITY: Final = "address.apartment_probability"
    LINE1_FORMAT: Final = "address.line1_format"
    LINE2_FORMAT: Final = "address.line2_format"
    APARTMENT_FORMAT: Final = "address.apartment_format"


class CompanyKeys:
    NAMES: Final = "company.names"
    SUFFIXES: Final = "company.suffixes"
    EMAIL_LOCAL_PARTS: Final = "company.email_local_parts"
    VAT_FORMAT: Final = "company.vat_identification_number_format"
    REGISTRATION_FORMAT: Final = "company.registration_number_format"


class TextKeys:
    LOREM_IPSUM: Final = "text.lorem_ipsum"
    TEXT: Final = "text.text"


class PaymentKeys:
    CARD_VENDORS: Final = "payment.card_vendors"
    CARD_VALIDITY_YEARS: Final = "payment.card_validity_years"
    IBAN_COUNTRY_CODE: Final = "payment.iban_country_code"
    IBAN_BANK_CODES: Final = "payment.iban_bank_codes"
    IBAN_BBAN_FORMAT: Final = "payment.iban_bban_format"


class NetKeys:
    DOMAIN_SUFFIXES: Final = "net.domain_suffixes"
    DOMAIN_WORDS: Final = "net.domain_words"
    URL_FORMATS: Final = "net.url_formats"
