"""Analysis services: aggregation, ranking, rendering and delivery policy."""
