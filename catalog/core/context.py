# catalog/core/context.py

import contextvars

correlation_id_ctx = contextvars.ContextVar("correlation_id", default=None)
operation_ctx = contextvars.ContextVar("operation", default=None)
