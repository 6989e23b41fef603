"""Optional comment filters composed into a single SQL predicate.

Every filter that is absent contributes ``true`` so the composed predicate
behaves the same whether zero, one or all filters are given. The returned
expression references ``users.email`` and is meant to be applied to a
``comments JOIN users`` selection.
"""
import datetime
import typing
import sqlalchemy
import catalog.models.comment
import catalog.models.user


def author_clause(author_substring: typing.Optional[str]) -> sqlalchemy.ColumnElement[bool]:
    if not author_substring:
        return sqlalchemy.true()
    return catalog.models.user.User.email.contains(author_substring, autoescape=True)


def since_clause(since: typing.Optional[datetime.datetime]) -> sqlalchemy.ColumnElement[bool]:
    if since is None:
        return sqlalchemy.true()
    return catalog.models.comment.Comment.created_at >= since


def build_predicate(
    author_substring: typing.Optional[str] = None,
    since: typing.Optional[datetime.datetime] = None
) -> sqlalchemy.ColumnElement[bool]:
    return sqlalchemy.and_(author_clause(author_substring), since_clause(since))
