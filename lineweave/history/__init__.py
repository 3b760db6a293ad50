"""Command history: entries, identifiers, queries and the storage interface."""