from django.db import models


class User(models.Model):
    """Account of a person using the task feature.

    Users are either regular members or administrators via the ``role``
    field.  Authentication is handled manually via session state, not via
    Django's built-in auth system; administrators bypass ownership checks
    in ``tasks.permissions``.
    """

    ROLE_MEMBER = "member"
    ROLE_ADMIN = "admin"
    ROLE_CHOICES = (
        (ROLE_MEMBER, "Membre"),
        (ROLE_ADMIN, "Administrateur"),
    )

    username = models.CharField(max_length=100, unique=True)
    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100)
    email = models.EmailField(unique=True)
    password = models.CharField(max_length=128)
    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default=ROLE_MEMBER)

    def __str__(self) -> str:
        return self.username

    @property
    def is_admin(self) -> bool:
        return self.role == self.ROLE_ADMIN
