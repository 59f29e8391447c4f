"""Exit codes for `python -m onboarding`."""

ONBOARDING_SUCCESS = 0  # Configuration saved (and agent launched if requested)
ONBOARDING_QUIT = 1  # User cancelled (Ctrl+C or declined a prompt)
ONBOARDING_FAILED = 2  # Wizard stopped on an unrecoverable error
