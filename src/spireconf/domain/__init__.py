"""Registration entry domain: value types, ports and reconciliation."""
