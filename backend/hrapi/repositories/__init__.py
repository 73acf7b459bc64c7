# Repositories package init
"""
HR API Backend — Repository Layer
===================================

What:  Data access abstractions over the document database.
How:   DocumentStore exposes generic collection CRUD and equality queries.
       Services depend on it; they never build SQL themselves.
"""
