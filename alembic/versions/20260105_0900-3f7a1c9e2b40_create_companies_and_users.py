"""create_companies_and_users

Revision ID: 3f7a1c9e2b40
Revises:
Create Date: 2026-01-05 09:00:12.118204+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f7a1c9e2b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create companies and users tables."""
    op.create_table(
        "companies",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "name",
            sa.String(length=150),
            nullable=False,
            comment="Company display name (unique)",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_companies_name"), "companies", ["name"], unique=True)

    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "username",
            sa.String(length=100),
            nullable=False,
            comment="Login name (unique)",
        ),
        sa.Column(
            "email",
            sa.String(length=150),
            nullable=False,
            comment="User email address (unique)",
        ),
        sa.Column(
            "role",
            sa.String(length=32),
            nullable=False,
            comment="Usuario, Superusuario or Administrador",
        ),
        sa.Column(
            "company_id",
            sa.Uuid(),
            nullable=True,
            comment="Owning company (required for Usuario and Superusuario)",
        ),
        sa.Column("privacy_policy_accepted", sa.Boolean(), nullable=False),
        sa.Column(
            "password_hash",
            sa.String(length=255),
            nullable=True,
            comment="Bcrypt digest (null until a password is established)",
        ),
        sa.Column("set_password_token", sa.String(length=128), nullable=True),
        sa.Column(
            "set_password_token_expires_at",
            sa.DateTime(timezone=True),
            nullable=True,
        ),
        sa.Column("reset_password_token", sa.String(length=128), nullable=True),
        sa.Column(
            "reset_password_token_expires_at",
            sa.DateTime(timezone=True),
            nullable=True,
        ),
        sa.Column("is_email_verified", sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(
            ["company_id"],
            ["companies.id"],
            ondelete="SET NULL",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_username"), "users", ["username"], unique=True)
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)
    op.create_index(op.f("ix_users_company_id"), "users", ["company_id"])
    op.create_index(
        op.f("ix_users_set_password_token"), "users", ["set_password_token"]
    )
    op.create_index(
        op.f("ix_users_reset_password_token"), "users", ["reset_password_token"]
    )


def downgrade() -> None:
    """Drop users and companies tables."""
    op.drop_index(op.f("ix_users_reset_password_token"), table_name="users")
    op.drop_index(op.f("ix_users_set_password_token"), table_name="users")
    op.drop_index(op.f("ix_users_company_id"), table_name="users")
    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_index(op.f("ix_users_username"), table_name="users")
    op.drop_table("users")
    op.drop_index(op.f("ix_companies_name"), table_name="companies")
    op.drop_table("companies")
