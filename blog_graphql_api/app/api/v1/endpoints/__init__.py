"""Root query and mutation resolvers, one module per entity."""
