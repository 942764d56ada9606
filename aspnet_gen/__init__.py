"""aspnet-gen: ASP.NET project generators and their conformance harness."""

__version__ = "0.1.0"
