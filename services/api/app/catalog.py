"""Static catalog data served by the API.

The project and team listings are literal constants: there is no database
behind them, and they never change while the process runs. Tuples keep the
top level immutable; handlers return them as-is and FastAPI serializes a fresh
JSON body on every request.
"""

PROJECTS = (
    {
        "id": 1,
        "name": "VantaOS",
        "description": "A Linux OS made from scratch using Linux kernel and glibc library. Security-focused and not bloated.",
        "githubUrl": "https://github.com/litaliano00-dev/vantaos/",
        "image": "vantaos.jpg",
        "tags": ("Linux", "Security", "OS"),
    },
    {
        "id": 2,
        "name": "GhostShare",
        "description": "Secure messaging app available on F-Droid, Android APK, Linux, macOS, and Windows.",
        "githubUrl": "https://github.com/litaliano00-dev/ghostshare/",
        "image": "ghostshare.png",
        "tags": ("Messaging", "Encryption", "Cross-platform"),
    },
    {
        "id": 3,
        "name": "VailUI",
        "description": "A lightweight, not bloated GUI for VantaOS designed for efficiency and user experience.",
        "githubUrl": "https://github.com/litaliano00-dev/vailui/",
        "image": "vailui.png",
        "tags": ("GUI", "Linux", "UI/UX"),
    },
    {
        "id": 4,
        "name": "VBoot",
        "description": "Secure fast bootloader for VantaOS, designed for speed and security during system startup.",
        "githubUrl": "https://github.com/litaliano00-dev/vboot/",
        "image": "vboot.png",
        "tags": ("Bootloader", "Security", "System"),
    },
)

TEAM = (
    {
        "name": "litaliano00",
        "role": "Founder & Lead Developer",
        "github": "https://github.com/litaliano00-dev/",
        "discord": "https://discord.com/users/litaliano00._",
    },
    {
        "name": "skibiditymus27",
        "role": "Core Developer",
        "github": "https://github.com/skibiditymus27",
        "discord": "https://discord.com/users/skibiditymus27",
    },
    {
        "name": "whitzscott",
        "role": "Core Developer",
        "github": "https://github.com/whitzzscott",
        "discord": "https://discord.com/users/whitzscott",
    },
)


def get_projects():
    """Return the project listing in declaration order."""
    return PROJECTS


def get_team():
    """Return the team listing in declaration order."""
    return TEAM
