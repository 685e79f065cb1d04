"""Allow ``python -m create_frontend_app``."""

from create_frontend_app.pipeline import main

main()
