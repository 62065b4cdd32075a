"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- commands/  → Write operations (CQRS)
- queries/   → Read operations (CQRS)
- dto/       → Data Transfer Objects and their validation rules
- common/    → Shared interfaces and the validation pipeline

Rules:
- Depends on Domain layer only
- No HTTP/GraphQL framework code here
"""
