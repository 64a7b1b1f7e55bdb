"""Domain records (matches, store snapshots) shared by repositories and routers."""
