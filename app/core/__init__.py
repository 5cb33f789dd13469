"""Core pipeline package.

Architectural role:
    Exposes the request pipeline that sits between API/CLI entrypoints and the
    prompting, LLM and NLP layers.

Composition:
    - `engine`: Straight-line request pipeline (`process_chat`).
    - `errors`: Error taxonomy mapped to HTTP statuses by the API layer.
    - `result_types`: Shared data contracts (`Message`, `ExtractionResult`).

Determinism and side effects:
    Package import itself is deterministic and side-effect free. Runtime side effects
    are performed by `engine` during request processing.
"""
