"""Pure helpers shared by states, services and pages."""
