"""Internal modules for the Sinch SDK.

WARNING: These modules back the public resource clients and may change
without notice. Do not import them from application code.

Modules:
    dispatch - Request dispatch engine and the capabilities it relies on
    resource - Base class for resource clients
    credentials - Bearer and basic-key credential providers
    models - Pydantic base models for payloads
    http - Shared HTTP transport configuration
    redaction - Credential redaction for debug output
"""
