"""Runtime configuration: settings, logging, and config file discovery."""
