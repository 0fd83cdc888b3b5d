"""Candidature application package.

Contains the ``Candidate`` model and the multi-step application form
(wizard) that collects it: the step table, the skip rule, the
validation rules and the final submission service.
"""
