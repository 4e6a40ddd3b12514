"""
Parameterized queries over accounts, stories, posts, comments and the
post like counter.

Every function takes the request session and commits its own write.
Counter updates are single conditional statements so concurrent
requests can't push a counter below zero.
"""
from sqlalchemy import select, update, desc
from sqlalchemy.orm import Session

from muro.core.db.tables.account import Account
from muro.core.db.tables.story import Story
from muro.core.db.tables.post import Post
from muro.core.db.tables.comment import Comment

# Account columns that hold media references
ACCOUNT_IMAGE_FIELDS = {"foto_perfil", "img_portada"}


# accounts
def list_accounts(session: Session) -> list[Account]:
    return list(session.execute(select(Account).order_by(Account.id)).scalars().all())


def get_account(session: Session, account_id: int) -> Account | None:
    return session.execute(select(Account).where(Account.id == account_id)).scalar()


def find_account_by_email(session: Session, correo: str) -> Account | None:
    return session.execute(select(Account).where(Account.correo == correo)).scalar()


def update_account_image(
    session: Session, account_id: int, field: str, media_url: str
) -> Account | None:
    """Point an account image column at a media reference; None if no row matched."""
    if field not in ACCOUNT_IMAGE_FIELDS:
        raise ValueError(f"Not an account image field: {field}")

    updated_id = session.execute(
        update(Account)
        .where(Account.id == account_id)
        .values({field: media_url})
        .returning(Account.id)
        .execution_options(synchronize_session=False)
    ).scalar()
    session.commit()

    if updated_id is None:
        return None
    return get_account(session, updated_id)


# stories
def create_story(session: Session, owner_id: int, media_url: str) -> Story:
    story = Story(id_usuario=owner_id, contenido=media_url)
    session.add(story)
    session.commit()
    session.refresh(story)
    return story


def list_stories(session: Session) -> list[Story]:
    return list(session.execute(select(Story).order_by(desc(Story.id))).scalars().all())


# posts
def create_post(
    session: Session,
    nombre: str | None,
    contenido: str | None,
    autor_id: int | None,
    imagen_url: str | None,
) -> Post:
    post = Post(
        nombre=nombre,
        contenido=contenido,
        autor_id=autor_id,
        imagen_url=imagen_url,
        likes_count=0,
    )
    session.add(post)
    session.commit()
    session.refresh(post)
    return post


def list_posts(session: Session) -> list[Post]:
    return list(session.execute(select(Post).order_by(desc(Post.id))).scalars().all())


# likes
def get_likes(session: Session, post_id: int) -> int | None:
    return session.execute(
        select(Post.likes_count).where(Post.id == post_id)
    ).scalar()


def increment_likes(session: Session, post_id: int) -> int | None:
    """Add one like; returns the new count, or None if the post doesn't exist."""
    likes = session.execute(
        update(Post)
        .where(Post.id == post_id)
        .values(likes_count=Post.likes_count + 1)
        .returning(Post.likes_count)
        .execution_options(synchronize_session=False)
    ).scalar()
    session.commit()
    return likes


def decrement_likes(session: Session, post_id: int) -> int | None:
    """
    Remove one like if the counter is above zero.

    Returns the new count, or None when nothing was removed (the counter
    is already zero or the post doesn't exist).
    """
    likes = session.execute(
        update(Post)
        .where(Post.id == post_id, Post.likes_count > 0)
        .values(likes_count=Post.likes_count - 1)
        .returning(Post.likes_count)
        .execution_options(synchronize_session=False)
    ).scalar()
    session.commit()
    return likes


# comments
def create_comment(session: Session, post_id: int, nombre: str, comentario: str) -> Comment:
    comment = Comment(post_id=post_id, nombre=nombre, comentario=comentario)
    session.add(comment)
    session.commit()
    session.refresh(comment)
    return comment


def list_comments(session: Session, post_id: int) -> list[Comment]:
    return list(
        session.execute(
            select(Comment)
            .where(Comment.post_id == post_id)
            .order_by(Comment.id)
        ).scalars().all()
    )
