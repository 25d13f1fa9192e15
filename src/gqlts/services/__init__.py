"""Service layer — type mapping and schema-driven code generation.

Services return :class:`~gqlts.services.result.ServiceResult`; the
mapper itself returns bare TypeScript expression trees.
"""
