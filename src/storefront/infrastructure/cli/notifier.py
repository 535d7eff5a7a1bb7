"""Terminal notification channel for the CLI."""

from __future__ import annotations

import click

from storefront.application.notifications import (
    Notification,
    NotificationLevel,
    Notifier,
)


class ClickNotifier(Notifier):

    def notify(self, notification: Notification) -> None:
        is_error = notification.level is NotificationLevel.ERROR
        click.secho(
            f"{notification.title}: {notification.message}",
            fg="red" if is_error else "green",
            err=is_error,
        )
