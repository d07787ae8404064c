"""Zsh section of dots configuration."""

from pydantic import BaseModel, ConfigDict, Field

_DEFAULT_PLUGINS = {
    "zsh-autosuggestions": "https://github.com/zsh-users/zsh-autosuggestions",
    "zsh-syntax-highlighting": "https://github.com/zsh-users/zsh-syntax-highlighting",
    "zsh-completions": "https://github.com/zsh-users/zsh-completions",
}


class ZshConfig(BaseModel):
    """Oh My Zsh and plugin configuration."""

    model_config = ConfigDict(extra="forbid")

    oh_my_zsh_dir: str = Field("~/.oh-my-zsh", description="Oh My Zsh installation directory")
    install_url: str = Field(
        "https://raw.githubusercontent.com/ohmyzsh/ohmyzsh/master/tools/install.sh",
        description="Oh My Zsh installer script",
    )
    plugins: dict[str, str] = Field(
        default_factory=lambda: dict(_DEFAULT_PLUGINS),
        description="Plugin name -> git URL, cloned into $ZSH_CUSTOM/plugins",
    )
