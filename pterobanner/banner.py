from rich.cells import cell_len
from rich.console import Console
from rich.markup import escape

console = Console()

BOX_WIDTH = 64
LABEL_WIDTH = 16


def banner_rows(info):
    """(label, value, style) for every banner line, in display order."""
    return [
        ("ISP", info.ip.isp, "green"),
        ("IPv4", f"{info.ip.ip} (Public IP)", "yellow"),
        ("Country", info.ip.country, "blue"),
        ("Region", info.ip.region, "blue"),
        ("OS", info.os_type, "magenta"),
        ("Uptime", info.uptime, "green"),
        ("NodeJS version", info.node_version, "yellow"),
        ("Python version", info.python_version, "yellow"),
        ("Memory", str(info.memory), "cyan"),
        ("Swap", str(info.swap), "cyan"),
        ("Disk", str(info.disk), "magenta"),
        ("CPUs", info.cpu_count, "green"),
        ("Processor", info.cpu_model, "white"),
        ("Arch", info.arch, "yellow"),
        ("Kernel", info.kernel, "blue"),
        ("CPU Usage", f"{info.cpu_usage}%", "red"),
        ("Current Time", info.current_time, "green"),
    ]


def render_banner(info, settings, out=None):
    out = out or console
    if settings.clear:
        out.clear()

    title = f"🚀  SYSTEM INFORMATION - {settings.panel_name}  🚀"
    out.print()
    out.print(f"[bold cyan]╔{'═' * BOX_WIDTH}╗[/bold cyan]")
    pad = max(BOX_WIDTH - cell_len(title), 0)
    left = pad // 2
    out.print(f"[bold cyan]║{' ' * left}{escape(title)}{' ' * (pad - left)}║[/bold cyan]")
    out.print(f"[bold cyan]╚{'═' * BOX_WIDTH}╝[/bold cyan]")
    out.print()

    for label, value, style in banner_rows(info):
        out.print(
            f"[cyan]▻ [bold]{label.ljust(LABEL_WIDTH)}[/bold][/cyan]: [{style}]{escape(str(value))}[/{style}]",
            highlight=False,
        )

    out.print()
    out.print(f"[bold cyan]{'═' * BOX_WIDTH}[/bold cyan]")
    out.print(f"[bold green]  ✓ {escape(settings.ready_message)}[/bold green]")
    out.print(f"[bold cyan]{'═' * BOX_WIDTH}[/bold cyan]")
    out.print()


if __name__ == "__main__":
    from pterobanner.config import load_settings
    from pterobanner.sysinfo import collect_system_info

    s = load_settings()
    render_banner(collect_system_info(s), s)
