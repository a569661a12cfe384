"""
unicon 명령줄 인터페이스

사용법:
    unicon 100 from celsius to fahrenheit
    unicon -r 3 5 from kilometers to miles
    unicon --show

종료 코드: 0 성공/정보 출력, 1 입력 검증 실패 또는 변환 실패
"""

from __future__ import annotations

import argparse
import re
import sys
from typing import Optional

from dotenv import load_dotenv

from unicon import __version__
from unicon.config import Config, get_config
from unicon.converter import convert_by_name
from unicon.errors import (
    CategoryMismatchError,
    CommandFormatError,
    ConversionError,
    InvalidValueError,
    UnknownUnitError,
)
from unicon.formatter import format_catalog, format_result
from unicon.logging_config import get_logger, setup_logging
from unicon.units import UnitRegistry, default_registry

logger = get_logger("cli")

# 부호(선택) + 숫자, 소수점 최대 1개, 숫자 최소 1개
_NUMERIC_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)$")

_EXPRESSION_LENGTH = 5

MSG_BAD_COUNT = "Invalid command format. Please provide the correct number of arguments."
MSG_BAD_KEYWORDS = "Invalid command format. Please provide both 'from' and 'to' units."
MSG_BAD_VALUE = "Invalid value provided. Please provide a valid numeric value."
MSG_BAD_UNITS = "Invalid units provided. Please provide valid units."
MSG_MISMATCH = "Cannot convert between different unit types."
MSG_HELP_HINT = "Use '-h, --help' for help."


class _ArgumentParser(argparse.ArgumentParser):
    """argparse 오류 시 종료 코드 2 대신 1 사용"""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n{MSG_HELP_HINT}\n")


def build_parser() -> argparse.ArgumentParser:
    """argparse 파서 구성"""
    parser = _ArgumentParser(
        prog="unicon",
        usage="%(prog)s [OPTIONS] VALUE from <UNIT> to <UNIT>",
        description="Convert between various units.",
        epilog=(
            "examples:\n"
            "  unicon 100 from celsius to fahrenheit\n"
            "  unicon -r 3 5 from kilometers to miles\n"
            "  unicon --show"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-r", "--round", dest="round_places", type=int, metavar="PLACES",
        help="Round the result to the specified number of decimal places.",
    )
    parser.add_argument(
        "-s", "--show", action="store_true",
        help="Show the full table of supported units.",
    )
    parser.add_argument(
        "-v", "--version", action="version", version=f"%(prog)s v{__version__}",
        help="Display version information and exit.",
    )
    parser.add_argument(
        "expression", nargs="*", metavar="TOKEN",
        help="VALUE from <UNIT> to <UNIT>",
    )
    return parser


def parse_value(token: str) -> float:
    """변환 값 검증 (지수 표기, inf/nan 불허)"""
    if not _NUMERIC_RE.match(token):
        raise InvalidValueError(token)
    return float(token)


def _positional_tokens(argv: list[str]) -> list[str]:
    """옵션과 옵션 인자를 뺀 토큰 (입력 순서 유지)"""
    tokens = []
    it = iter(argv)
    for tok in it:
        if tok == "--":
            tokens.extend(it)
            break
        name, has_value = tok.split("=", 1)[0], "=" in tok
        if tok.startswith("--") and len(name) > 2:
            if "--round".startswith(name) and not has_value:
                next(it, None)
            continue
        if tok == "-r":
            next(it, None)
        elif tok.startswith("-r") or tok == "-s":
            continue
        else:
            tokens.append(tok)
    return tokens


def parse_command_line(
    parser: argparse.ArgumentParser, argv: list[str]
) -> tuple[argparse.Namespace, list[str]]:
    """argv -> (옵션, 표현식 토큰)

    argparse는 "-5." 같은 음수를 옵션으로 오인하므로,
    숫자 형태의 미인식 토큰은 원래 위치 그대로 표현식에 되돌립니다.
    """
    args, extras = parser.parse_known_intermixed_args(argv)
    unknown = [tok for tok in extras if not _NUMERIC_RE.match(tok)]
    if unknown:
        parser.error(f"unrecognized arguments: {' '.join(unknown)}")
    if extras:
        return args, _positional_tokens(argv)
    return args, args.expression


def parse_expression(tokens: list[str]) -> tuple[float, str, str]:
    """VALUE from UNIT to UNIT 해석 -> (value, from_name, to_name)

    from/to 키워드는 대소문자 무시, 각각 정확히 1회.
    "VALUE to X from Y" 순서도 허용합니다.
    """
    if len(tokens) != _EXPRESSION_LENGTH:
        raise CommandFormatError(MSG_BAD_COUNT)

    value = parse_value(tokens[0])

    from_hits = [i for i in range(1, 4) if tokens[i].casefold() == "from"]
    to_hits = [i for i in range(1, 4) if tokens[i].casefold() == "to"]
    if len(from_hits) != 1 or len(to_hits) != 1:
        raise CommandFormatError(MSG_BAD_KEYWORDS)

    from_pos, to_pos = from_hits[0], to_hits[0]
    # 키워드 바로 뒤가 단위: 두 키워드 위치는 정확히 2칸 차이
    if abs(from_pos - to_pos) != 2:
        raise CommandFormatError(MSG_BAD_KEYWORDS)

    return value, tokens[from_pos + 1], tokens[to_pos + 1]


def run_conversion(
    tokens: list[str],
    registry: UnitRegistry,
    round_places: Optional[int] = None,
    default_places: int = 2,
) -> str:
    """토큰 -> 결과 문자열 (UniconError 계열 예외 전파)"""
    value, from_name, to_name = parse_expression(tokens)
    converted = convert_by_name(value, from_name, to_name, registry)
    logger.debug(
        "해석: %r %s -> %s", value, converted.from_unit.unit.name, converted.to_unit.unit.name
    )
    return format_result(
        converted.value, converted.from_unit.name, converted.result, converted.to_unit.name,
        round_places=round_places, default_places=default_places,
    )


def _init_logging(cfg: Config) -> None:
    setup_logging(
        level=cfg.log_level,
        log_format=cfg.log_format,
        log_file=cfg.log_file or None,
        max_bytes=cfg.log_max_bytes,
        backup_count=cfg.log_backup_count,
    )


def main(argv: Optional[list[str]] = None) -> int:
    """메인 엔트리포인트 (종료 코드 반환)"""
    load_dotenv()
    cfg = get_config()
    _init_logging(cfg)

    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()

    # 인자 없이 실행하면 도움말
    if not argv:
        parser.print_help()
        return 0

    args, expression = parse_command_line(parser, argv)

    if args.round_places is not None and args.round_places < 0:
        parser.error(f"argument -r/--round: must be a non-negative integer: {args.round_places}")

    registry = default_registry()

    if args.show:
        print(format_catalog(registry))
        return 0

    try:
        line = run_conversion(
            expression,
            registry,
            round_places=args.round_places,
            default_places=cfg.default_places,
        )
    except CommandFormatError as e:
        print(e, file=sys.stderr)
        parser.print_help(sys.stderr)
        return 1
    except InvalidValueError as e:
        logger.info("숫자 검증 실패: %r", e.token)
        print(MSG_BAD_VALUE, file=sys.stderr)
        return 1
    except UnknownUnitError as e:
        logger.info("알 수 없는 단위: %r", e.name)
        print(MSG_BAD_UNITS, file=sys.stderr)
        parser.print_help(sys.stderr)
        return 1
    except CategoryMismatchError as e:
        logger.info("카테고리 불일치: %s -> %s", e.from_name, e.to_name)
        print(MSG_MISMATCH, file=sys.stderr)
        return 1
    except ConversionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
