"""
OS scheduler configuration generation.

Turns a five-field cron expression into a launchd plist, a systemd
service/timer pair, or a crontab line.
"""
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

from core.application.dtos import Platform, PlatformConfig

APP_NAME = "reflection-weekly"
LAUNCHD_LABEL = "com.reflection-weekly.schedule"
RUN_COMMAND = f"{APP_NAME} run --scheduled"

_SYSTEMD_WEEKDAYS = {
    "0": "Sun",
    "1": "Mon",
    "2": "Tue",
    "3": "Wed",
    "4": "Thu",
    "5": "Fri",
    "6": "Sat",
    "7": "Sun",
}


@dataclass(frozen=True)
class CronFields:
    minute: str = "*"
    hour: str = "*"
    day_of_month: str = "*"
    month: str = "*"
    day_of_week: str = "*"

    @classmethod
    def parse(cls, expression: str) -> "CronFields":
        parts = expression.split()
        parts += ["*"] * (5 - len(parts))
        return cls(*parts[:5])


def build_platform_config(
    platform: Platform,
    cron_expression: str,
    home: Optional[Path] = None,
    now: Optional[datetime] = None,
) -> PlatformConfig:
    """
    Build the scheduler configuration for ``platform``.

    Args:
        platform: Target OS scheduler
        cron_expression: Validated cron expression
        home: Home directory used in generated paths
        now: Generation time written into the crontab comment

    Returns:
        PlatformConfig with content, target path and install steps
    """
    home = home or Path.home()
    fields = CronFields.parse(cron_expression)
    if platform == Platform.MACOS_LAUNCHD:
        return _launchd_config(fields, home)
    if platform == Platform.LINUX_SYSTEMD:
        return _systemd_config(fields, home)
    return _cron_config(cron_expression, home, now or datetime.now())


def cron_to_systemd_calendar(fields: CronFields) -> str:
    """
    Convert cron fields to a systemd ``OnCalendar`` value.

    Only plain values, ``*`` and weekday ranges like ``1-5`` are translated.
    """
    calendar = ""
    if fields.day_of_week != "*":
        day_parts = fields.day_of_week.split("-")
        if len(day_parts) == 2:
            start = _SYSTEMD_WEEKDAYS.get(day_parts[0], day_parts[0])
            end = _SYSTEMD_WEEKDAYS.get(day_parts[1], day_parts[1])
            calendar += f"{start}..{end} "
        else:
            calendar += f"{_SYSTEMD_WEEKDAYS.get(fields.day_of_week, fields.day_of_week)} "

    calendar += f"*-{fields.month}-{fields.day_of_month} "
    hour = "*" if fields.hour == "*" else fields.hour.zfill(2)
    minute = "*" if fields.minute == "*" else fields.minute.zfill(2)
    calendar += f"{hour}:{minute}:00"
    return calendar


def _launchd_config(fields: CronFields, home: Path) -> PlatformConfig:
    plist_path = home / "Library" / "LaunchAgents" / f"{LAUNCHD_LABEL}.plist"
    log_dir = home / f".{APP_NAME}" / "logs"

    interval_keys = [
        ("Weekday", fields.day_of_week),
        ("Hour", fields.hour),
        ("Minute", fields.minute),
        ("Day", fields.day_of_month),
        ("Month", fields.month),
    ]
    interval = "      <dict>\n"
    for key, value in interval_keys:
        if value.isdigit():
            interval += f"        <key>{key}</key>\n        <integer>{int(value)}</integer>\n"
    interval += "      </dict>"

    content = f"""<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN" "http://www.apple.com/DTDs/PropertyList-1.0.dtd">
<plist version="1.0">
<dict>
  <key>Label</key>
  <string>{LAUNCHD_LABEL}</string>
  <key>ProgramArguments</key>
  <array>
    <string>{APP_NAME}</string>
    <string>run</string>
    <string>--scheduled</string>
  </array>
  <key>StartCalendarInterval</key>
  <array>
{interval}
  </array>
  <key>StandardOutPath</key>
  <string>{log_dir}/launchd-stdout.log</string>
  <key>StandardErrorPath</key>
  <string>{log_dir}/launchd-stderr.log</string>
  <key>WorkingDirectory</key>
  <string>{home}</string>
</dict>
</plist>"""

    instructions = (
        "1. Save the plist file:",
        f"   {plist_path}",
        "2. Load the schedule:",
        f"   launchctl load ~/Library/LaunchAgents/{LAUNCHD_LABEL}.plist",
        "3. Check the schedule:",
        f"   launchctl list | grep {LAUNCHD_LABEL}",
        "4. To remove the schedule:",
        f"   launchctl unload ~/Library/LaunchAgents/{LAUNCHD_LABEL}.plist",
    )
    return PlatformConfig(
        platform=Platform.MACOS_LAUNCHD,
        config_content=content,
        config_path=str(plist_path),
        install_instructions=instructions,
    )


def _systemd_config(fields: CronFields, home: Path) -> PlatformConfig:
    systemd_dir = home / ".config" / "systemd" / "user"
    timer_path = systemd_dir / f"{APP_NAME}.timer"

    service = f"""# --- {APP_NAME}.service ---
[Unit]
Description=Weekly reflection generation
After=network-online.target
Wants=network-online.target

[Service]
Type=oneshot
ExecStart=/usr/bin/env {RUN_COMMAND}
WorkingDirectory={home}
StandardOutput=journal
StandardError=journal

[Install]
WantedBy=default.target"""

    timer = f"""# --- {APP_NAME}.timer ---
[Unit]
Description=Weekly reflection generation timer

[Timer]
OnCalendar={cron_to_systemd_calendar(fields)}
Persistent=true

[Install]
WantedBy=timers.target"""

    instructions = (
        "1. Create the systemd user directory:",
        f"   mkdir -p {systemd_dir}",
        f"2. Save the service section as {systemd_dir}/{APP_NAME}.service",
        f"3. Save the timer section as {timer_path}",
        "4. Reload systemd:",
        "   systemctl --user daemon-reload",
        "5. Enable and start the timer:",
        f"   systemctl --user enable --now {APP_NAME}.timer",
        "6. Check the timer:",
        f"   systemctl --user status {APP_NAME}.timer",
        "7. To remove the timer:",
        f"   systemctl --user disable --now {APP_NAME}.timer",
    )
    return PlatformConfig(
        platform=Platform.LINUX_SYSTEMD,
        config_content=f"{service}\n\n{timer}",
        config_path=str(timer_path),
        install_instructions=instructions,
    )


def _cron_config(cron_expression: str, home: Path, now: datetime) -> PlatformConfig:
    log_dir = home / f".{APP_NAME}" / "logs"
    log_file = log_dir / "cron-execution.log"
    line = f"{cron_expression} cd {home} && {RUN_COMMAND} >> {log_file} 2>&1"

    content = f"# {APP_NAME}: weekly reflection generation\n# generated at: {now.isoformat()}\n{line}"
    instructions = (
        "1. Create the log directory:",
        f"   mkdir -p {log_dir}",
        "2. Check the current crontab:",
        "   crontab -l",
        "3. Append the entry:",
        f"   (crontab -l 2>/dev/null; echo '{line}') | crontab -",
        "4. Verify the entry:",
        f"   crontab -l | grep {APP_NAME}",
        "5. To remove the entry:",
        f"   crontab -l | grep -v {APP_NAME} | crontab -",
    )
    return PlatformConfig(
        platform=Platform.LINUX_CRON,
        config_content=content,
        config_path=str(home / f".{APP_NAME}" / "crontab-entry.txt"),
        install_instructions=instructions,
    )
