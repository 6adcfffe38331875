"""Tour Catalog: filter, sort and render a static list of tour listings."""
