from routeguard import GuardContext, combine_guards, evaluate_sync, require_auth, require_onboarding


def main() -> None:
    dashboard = combine_guards(require_auth, require_onboarding)
    ctx = GuardContext(
        is_authenticated=True,
        is_new_user=False,
        onboarding_complete=False,
        current_path="/dashboard",
    )
    d = evaluate_sync(dashboard, ctx)
    print(d.allowed, d.redirect_to, d.reason)  # False /onboarding/1 Please complete onboarding


if __name__ == "__main__":
    main()
