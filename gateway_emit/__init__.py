# ==============================================
# Gateway Emit
# ==============================================
#
# Package Structure (2 Stages + Orchestrator):
#
# gateway_emit/
# ├── sources/          # File and stdin readers used by resolution
# ├── resolution/       # Stage 1: pick a data source, build the payload
# ├── delivery/         # Stage 2: send the payload to the Event Gateway
# ├── config.py         # Configuration management
# ├── encoding.py       # Strict JSON parsing, compact serialization
# ├── errors.py         # Error taxonomy
# ├── options.py        # Invocation options
# ├── telemetry.py      # Usage tracking sinks
# ├── command.py        # Orchestrator class
# └── cli.py            # Command line entry point
#
# ==============================================

__version__ = "0.1.0"
