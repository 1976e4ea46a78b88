# Command line interface for workspace groups
