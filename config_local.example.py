# config_local.example.py
#
# Copy to config_local.py (gitignored) for machine-specific overrides.
# Only the names below are honoured; everything else belongs in .env.

TASKS_PATH = "~/Documents/tasks.txt"
AUTOSAVE = True
