"""create-frontend-app -- interactive scaffolder for React and Next.js projects."""

__version__ = "1.0.0"
