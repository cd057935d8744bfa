"""Entrypoints (inbound adapters) for CHECKEDOPS.

Expose the operations to the outside world. Parse and validate raw inputs,
call :mod:`checkedops.operations`, and present results.
"""
