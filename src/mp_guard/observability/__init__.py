"""Observability – logging only; guards emit no metrics or traces."""
