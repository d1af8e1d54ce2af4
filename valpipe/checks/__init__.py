"""Format checker catalog: pure ``(str) -> bool`` predicates."""
from . import dates, strings
from .dates import (
    is_ansic,
    is_date_time,
    is_kitchen,
    is_rfc1123,
    is_rfc1123z,
    is_rfc3339,
    is_rfc3339_nano,
    is_rfc822,
    is_rfc822z,
    is_rfc850,
    is_ruby_date,
    is_stamp,
    is_stamp_micro,
    is_stamp_milli,
    is_stamp_nano,
    is_time_only,
    is_unix_date,
)
from .strings import (
    is_alpha,
    is_alphanumeric,
    is_ascii,
    is_base32,
    is_base58,
    is_base64,
    is_bitcoin_address,
    is_credit_card,
    is_data_uri,
    is_date,
    is_decimal,
    is_email,
    is_evm_address,
    is_hex_color,
    is_hexadecimal,
    is_hsl,
    is_html,
    is_ipv4,
    is_ipv6,
    is_json,
    is_path,
    is_port,
    is_rgb,
    is_ulid,
    is_url,
    is_uuid,
    is_uuid_v1,
    is_uuid_v3,
    is_uuid_v4,
    is_uuid_v5,
    is_xml,
)
