"""User-facing messages for submission outcomes.

The product ships a fixed Japanese message set. Keep sign-in's credential
message generic: it must not reveal whether an email is registered.
"""

from __future__ import annotations

from typing import Final


# Shared across screens
INVALID_EMAIL: Final[str] = "メールアドレスの形式が正しくありません。"
NETWORK_UNAVAILABLE: Final[str] = (
    "ネットワークエラーが発生しました。インターネット接続をご確認ください。"
)

# Sign-in
SIGN_IN_FAILED: Final[str] = (
    "認証に失敗しました。メールアドレスとパスワードをご確認ください。"
)
SIGN_IN_ACCOUNT_DISABLED: Final[str] = "このアカウントは無効化されています。"
SIGN_IN_RATE_LIMITED: Final[str] = (
    "ログイン試行回数が上限を超えました。しばらく時間をおいてから再試行してください。"
)
SIGN_IN_UNKNOWN: Final[str] = (
    "ログインに失敗しました。しばらく時間をおいてから再試行してください。"
)

# Sign-up
SIGN_UP_ALREADY_REGISTERED: Final[str] = "このメールアドレスは既に使用されています。"
SIGN_UP_WEAK_SECRET: Final[str] = (
    "パスワードが弱すぎます。より強力なパスワードを設定してください。"
)
SIGN_UP_OPERATION_NOT_ALLOWED: Final[str] = "この操作は許可されていません。"
SIGN_UP_UNKNOWN: Final[str] = (
    "アカウント作成に失敗しました。しばらく時間をおいてから再試行してください。"
)

# Reset request
RESET_NOT_REGISTERED: Final[str] = "このメールアドレスは登録されていません。"
RESET_RATE_LIMITED: Final[str] = (
    "リクエストが多すぎます。しばらく時間をおいてから再試行してください。"
)
RESET_UNKNOWN: Final[str] = (
    "パスワードリセットメールの送信に失敗しました。しばらく時間をおいてから再試行してください。"
)
RESET_EMAIL_SENT: Final[str] = (
    "パスワードリセットメールを送信しました。メールをご確認ください。"
)
