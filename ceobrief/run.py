import os, sys
from datetime import datetime
from requests.exceptions import RequestException
from ceobrief.config import BriefConfig, load_config
from ceobrief.errors import BriefError, MissingPriorities
from ceobrief.render import Brief, render_report
from ceobrief.tools.archive import find_latest_brief, today_iso, write_brief
from ceobrief.tools.sections import parse_sections, unrecognized_headings
from ceobrief.tools.telegram import send_message

class BriefRunner:
    """One linear pass: read -> find prior -> extract -> render -> write -> (send)."""

    def __init__(self, config: BriefConfig, now: datetime | None = None,
                 send=send_message, dry_run: bool = False):
        self.config = config
        self.now = now
        self.send = send
        self.dry_run = dry_run

    def read_priorities(self) -> str:
        p = self.config.priorities_path
        try:
            with open(p, "r", encoding="utf-8") as f:
                text = f.read()
        except FileNotFoundError:
            text = ""
        except (OSError, UnicodeDecodeError) as e:
            raise MissingPriorities(f"Cannot read {p}: {e}") from None
        if not text:
            raise MissingPriorities(f"Missing {p} — create it first.")
        return text

    def run(self) -> Brief:
        cfg = self.config
        date = today_iso(cfg.utc_offset_hours, self.now)
        md = self.read_priorities()
        os.makedirs(cfg.briefs_dir, exist_ok=True)

        # resolve the prior brief before today's file exists
        latest = find_latest_brief(cfg.briefs_dir)
        prior_ref = os.path.basename(latest)[:-3] if latest else None

        for h in unrecognized_headings(md):
            print(f"Ignoring unrecognized heading: ## {h}")
        brief = render_report(parse_sections(md), date, prior_ref, repo=cfg.repo,
                              company=cfg.company, brief_time=cfg.brief_time,
                              timezone_label=cfg.timezone_label)
        path = write_brief(cfg.briefs_dir, date, brief.text)
        print(f"Wrote brief: {path}")

        if self.dry_run:
            print("Dry run. Skipping Telegram send.")
        elif not cfg.telegram_enabled:
            print("Telegram not configured (missing secrets). Skipping send.")
        else:
            self.send(cfg.telegram_token, cfg.telegram_chat_id, brief.summary, timeout=cfg.timeout)
            print("Telegram sent.")
        return brief

def main(argv=None, environ=None) -> int:
    import argparse
    from dotenv import load_dotenv
    ap = argparse.ArgumentParser(description="Write today's CEO brief and send the summary to Telegram.")
    ap.add_argument("--config", default=None, help="YAML config file (default: $BRIEF_CONFIG)")
    ap.add_argument("--priorities", default=None, help="source document (default: ops/priorities.md)")
    ap.add_argument("--briefs-dir", default=None, help="output directory (default: ops/briefs)")
    ap.add_argument("--repo", default=None, help="OWNER/REPO used for the report link")
    ap.add_argument("--dry-run", action="store_true", help="write the brief but do not send")
    ap.add_argument("--print", dest="echo", action="store_true", help="echo the brief to stdout")
    a = ap.parse_args(argv)
    if environ is None:
        load_dotenv()
    try:
        cfg = load_config(a.config, environ, priorities_path=a.priorities,
                          briefs_dir=a.briefs_dir, repo=a.repo)
        brief = BriefRunner(cfg, dry_run=a.dry_run).run()
    except (BriefError, OSError, RequestException) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    if a.echo:
        print(brief.text)
    return 0

if __name__ == "__main__":
    sys.exit(main())
