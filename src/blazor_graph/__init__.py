"""blazor-graph: lay out Blazor component usage as paginated card diagrams."""

__version__ = "0.3.0"
