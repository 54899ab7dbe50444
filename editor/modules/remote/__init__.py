from editor.modules.remote.client import RemoteConfig, RemoteError, RemoteTimeout, RepoClient

__all__ = ["RemoteConfig", "RemoteError", "RemoteTimeout", "RepoClient"]
