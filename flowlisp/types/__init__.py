"""Value and environment types for flow."""
