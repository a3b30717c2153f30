"""Well-known JSON Schema `format` values for string properties."""

from __future__ import annotations

# Date and time
DATE_TIME = "date-time"
TIME = "time"
DATE = "date"
DURATION = "duration"

# Email
EMAIL = "email"
IDN_EMAIL = "idn-email"

# Hostname
HOSTNAME = "hostname"
IDN_HOSTNAME = "idn-hostname"

# IP address
IPV4 = "ipv4"
IPV6 = "ipv6"

# Resource identifiers
UUID = "uuid"
URI = "uri"
URI_REFERENCE = "uri-reference"
IRI = "iri"
IRI_REFERENCE = "iri-reference"
URI_TEMPLATE = "uri-template"
