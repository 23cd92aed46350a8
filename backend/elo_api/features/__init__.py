"""Feature modules: accounts, ranks and rosters."""
