"""Text export for decoded notes.

Contains:
- options: ExportConfig, the run configuration built by the CLI
- reporter: writes one note block to a text sink
- exporter: manifest -> notes -> reporter pipeline
"""
