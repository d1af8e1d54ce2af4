# Core module exports
from valpipe.core.config import Settings, get_settings
from valpipe.core.logging import (
    configure_logging,
    configure_from_settings,
    get_logger,
    bind_context,
    clear_context,
    unbind_context,
    schema_logger,
    parser_logger,
)
