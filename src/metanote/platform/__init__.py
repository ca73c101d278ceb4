"""Platform services (logging) shared by every Metanote layer."""
