"""Exit codes shared by CLI commands."""

SUCCESS_EXIT_CODE = 0
VALIDATION_EXIT_CODE = 2
PROVIDER_EXIT_CODE = 3
NETWORK_EXIT_CODE = 4
