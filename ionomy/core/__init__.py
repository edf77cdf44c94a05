"""
Core Package

Exchange-independent building blocks of the client:
- config: environment-driven settings (pydantic-settings)
- logging: central logger setup
- schemas: Pydantic models (ClientConfig, Credentials, SignedHeaders, ResponseEnvelope)
- errors: ArgumentError / ApiError / TransportError
"""
