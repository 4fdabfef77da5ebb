"""Precomputed lookup table for the fixed set of HTML atoms.

Every atom is a 32-bit code: the high bits give the offset of its name in
``ATOM_TEXT`` and the low 8 bits its length.  ``TABLE`` is a cuckoo hash
table of ``2**TABLE_BITS`` slots keyed by an FNV hash seeded with ``HASH0``;
each atom sits in one of two slots, taken from the low and the high 16 bits
of that hash.
"""

from __future__ import annotations

__all__ = [
    "ATOM_TEXT",
    "HASH0",
    "MAX_ATOM_LEN",
    "TABLE",
    "TABLE_BITS",
    "known_atoms",
]

HASH0 = 0x81CDF10E
"""Starting value of the FNV hash used to index ``TABLE``."""

MAX_ATOM_LEN = 25
"""Length of the longest atom name."""

TABLE_BITS = 9
"""``TABLE`` has ``2**TABLE_BITS`` slots."""

ATOM_TEXT = (
    "abbradiogrouparamainavalueaccept-charsetbodyaccesskeygenobrb"
    "asefontimeupdateviacacheightmlabelooptgroupatternoembedetail"
    "sampictureversedfnoframesetdirnameterowspanomoduleacronymali"
    "gnmarkbdialogallowpaymentrequestrikeytypeallowusermediagroup"
    "ingaltfooterubyasyncanvasidefaultitleaudioncancelautofocusan"
    "dboxmplaceholderautoplaysinlinebdoncanplaythrough1bgsoundisa"
    "bledivarbigblinkindraggablegendblockquotebuttonabortcitempro"
    "penoncecolgrouplaintextrackcolorcolspannotation-xmlcommandco"
    "ntrolshapecoordslotranslatecrossoriginsmallowfullscreenoscri"
    "ptfacenterfieldsetfigcaptionafterprintegrityfigurequiredfore"
    "ignObjectforeignobjectformactionautocompleteerrorformenctype"
    "mustmatchallengeformmethodformnovalidatetimeformtargethgroup"
    "osterhiddenhigh2hreflanghttp-equivideonclickiframeimageimgly"
    "ph3isindexismappletitemtypemarqueematheadersortedmaxlength4m"
    "inlength5mtextareadonlymultiplemutedoncloseamlessourceoncont"
    "extmenuitemidoncopyoncuechangeoncutondblclickondragendondrag"
    "enterondragexitemreferrerpolicyondragleaveondragoverondragst"
    "articleondropzonemptiedondurationchangeonendedonerroronfocus"
    "paceronhashchangeoninputmodeloninvalidonkeydownloadonkeypres"
    "spellcheckedonkeyupreloadonlanguagechangeonloadeddatalisting"
    "onloadedmetadatabindexonloadendonloadstartonmessageerroronmo"
    "usedownonmouseenteronmouseleaveonmousemoveonmouseoutputonmou"
    "seoveronmouseupromptonmousewheelonofflineononlineonpagehides"
    "classectionbluronpageshowbronpastepublicontenteditableonpaus"
    "emaponplayingonpopstateonprogressrcdocodeferonratechangeonre"
    "jectionhandledonresetonresizesrclangonscrollonsecuritypolicy"
    "violationauxclickonseekedonseekingonselectedonshowidth6onsor"
    "tableonstalledonstorageonsubmitemscopedonsuspendontoggleonun"
    "handledrejectionbeforeprintonunloadonvolumechangeonwaitingon"
    "wheeloptimumanifestrongoptionbeforeunloaddressrcsetstylesumm"
    "arysupsvgsystemplateworkertypewrap"
)
"""Concatenated, overlapping atom names."""

_SLOTS: dict[int, int] = {
    0x1: 0xE60A,  # mediagroup
    0x2: 0x2E404,  # lang
    0x4: 0x2C09,  # accesskey
    0x5: 0x8B08,  # frameset
    0x7: 0x63A08,  # onselect
    0x8: 0x71106,  # system
    0xA: 0x64905,  # width
    0xC: 0x2890B,  # formenctype
    0xD: 0x13702,  # ol
    0xE: 0x3970B,  # oncuechange
    0x10: 0x14B03,  # bdo
    0x11: 0x11505,  # audio
    0x12: 0x17A09,  # draggable
    0x14: 0x2F105,  # video
    0x15: 0x2B102,  # mn
    0x16: 0x38704,  # menu
    0x17: 0x2CF06,  # poster
    0x19: 0xF606,  # footer
    0x1A: 0x2A806,  # method
    0x1B: 0x2B808,  # datetime
    0x1C: 0x19507,  # onabort
    0x1D: 0x460E,  # updateviacache
    0x1E: 0xFF05,  # async
    0x1F: 0x49D06,  # onload
    0x21: 0x11908,  # oncancel
    0x22: 0x62908,  # onseeked
    0x23: 0x30205,  # image
    0x24: 0x5D812,  # onrejectionhandled
    0x26: 0x17404,  # link
    0x27: 0x51D06,  # output
    0x28: 0x33104,  # head
    0x29: 0x4FF0C,  # onmouseleave
    0x2A: 0x57F07,  # onpaste
    0x2B: 0x5A409,  # onplaying
    0x2C: 0x1C407,  # colspan
    0x2F: 0x1BF05,  # color
    0x30: 0x5F504,  # size
    0x31: 0x2E80A,  # http-equiv
    0x33: 0x601,  # i
    0x34: 0x5590A,  # onpagehide
    0x35: 0x68C14,  # onunhandledrejection
    0x37: 0x42A07,  # onerror
    0x3A: 0x3B08,  # basefont
    0x3F: 0x1303,  # nav
    0x40: 0x17704,  # kind
    0x41: 0x35708,  # readonly
    0x42: 0x30806,  # mglyph
    0x44: 0xB202,  # li
    0x46: 0x2D506,  # hidden
    0x47: 0x70E03,  # svg
    0x48: 0x58304,  # step
    0x49: 0x23F09,  # integrity
    0x4A: 0x58606,  # public
    0x4C: 0x1AB03,  # col
    0x4D: 0x1870A,  # blockquote
    0x4E: 0x34F02,  # h5
    0x50: 0x5B908,  # progress
    0x51: 0x5F505,  # sizes
    0x52: 0x34502,  # h4
    0x56: 0x33005,  # thead
    0x57: 0xD607,  # keytype
    0x58: 0x5B70A,  # onprogress
    0x59: 0x44B09,  # inputmode
    0x5A: 0x3B109,  # ondragend
    0x5D: 0x3A205,  # oncut
    0x5E: 0x43706,  # spacer
    0x5F: 0x1AB08,  # colgroup
    0x62: 0x16502,  # is
    0x65: 0x3C02,  # as
    0x66: 0x54809,  # onoffline
    0x67: 0x33706,  # sorted
    0x69: 0x48D10,  # onlanguagechange
    0x6C: 0x43D0C,  # onhashchange
    0x6D: 0x9604,  # name
    0x6E: 0xF505,  # tfoot
    0x6F: 0x56104,  # desc
    0x70: 0x33D03,  # max
    0x72: 0x1EA06,  # coords
    0x73: 0x30D02,  # h3
    0x74: 0x6E70E,  # onbeforeunload
    0x75: 0x9C04,  # rows
    0x76: 0x63C06,  # select
    0x77: 0x9805,  # meter
    0x78: 0x38B06,  # itemid
    0x79: 0x53C0C,  # onmousewheel
    0x7A: 0x5C006,  # srcdoc
    0x7D: 0x1BA05,  # track
    0x7F: 0x31F08,  # itemtype
    0x82: 0xA402,  # mo
    0x83: 0x41B08,  # onchange
    0x84: 0x33107,  # headers
    0x85: 0x5CC0C,  # onratechange
    0x86: 0x60819,  # onsecuritypolicyviolation
    0x88: 0x4A508,  # datalist
    0x89: 0x4E80B,  # onmousedown
    0x8A: 0x1EF04,  # slot
    0x8B: 0x4B010,  # onloadedmetadata
    0x8C: 0x1A06,  # accept
    0x8D: 0x26806,  # object
    0x91: 0x6B30E,  # onvolumechange
    0x92: 0x2107,  # charset
    0x93: 0x27613,  # onautocompleteerror
    0x94: 0xC113,  # allowpaymentrequest
    0x95: 0x2804,  # body
    0x96: 0x10A07,  # default
    0x97: 0x63C08,  # selected
    0x98: 0x21E04,  # face
    0x99: 0x1E505,  # shape
    0x9B: 0x68408,  # ontoggle
    0x9E: 0x64B02,  # dt
    0x9F: 0xB604,  # mark
    0xA1: 0xB01,  # u
    0xA4: 0x6AB08,  # onunload
    0xA5: 0x5D04,  # loop
    0xA6: 0x16408,  # disabled
    0xAA: 0x42307,  # onended
    0xAB: 0xB00A,  # malignmark
    0xAD: 0x67B09,  # onsuspend
    0xAE: 0x35105,  # mtext
    0xAF: 0x64F06,  # onsort
    0xB0: 0x19D08,  # itemprop
    0xB3: 0x67109,  # itemscope
    0xB4: 0x17305,  # blink
    0xB6: 0x3B106,  # ondrag
    0xB7: 0xA702,  # ul
    0xB8: 0x26E04,  # form
    0xB9: 0x12907,  # sandbox
    0xBA: 0x8B05,  # frame
    0xBB: 0x1505,  # value
    0xBC: 0x66209,  # onstorage
    0xBF: 0xAA07,  # acronym
    0xC0: 0x19A02,  # rt
    0xC2: 0x202,  # br
    0xC3: 0x22608,  # fieldset
    0xC4: 0x2900D,  # typemustmatch
    0xC5: 0xA208,  # nomodule
    0xC6: 0x6C07,  # noembed
    0xC7: 0x69E0D,  # onbeforeprint
    0xC8: 0x19106,  # button
    0xC9: 0x2F507,  # onclick
    0xCA: 0x70407,  # summary
    0xCD: 0xFB04,  # ruby
    0xCE: 0x56405,  # class
    0xCF: 0x3F40B,  # ondragstart
    0xD0: 0x23107,  # caption
    0xD4: 0xDD0E,  # allowusermedia
    0xD5: 0x4CF0B,  # onloadstart
    0xD9: 0x16B03,  # div
    0xDA: 0x4A904,  # list
    0xDB: 0x32E04,  # math
    0xDC: 0x44B05,  # input
    0xDF: 0x3EA0A,  # ondragover
    0xE0: 0x2DE02,  # h2
    0xE2: 0x1B209,  # plaintext
    0xE4: 0x4F30C,  # onmouseenter
    0xE7: 0x47907,  # checked
    0xE8: 0x47003,  # pre
    0xEA: 0x35F08,  # multiple
    0xEB: 0xBA03,  # bdi
    0xEC: 0x33D09,  # maxlength
    0xED: 0xCF01,  # q
    0xEE: 0x61F0A,  # onauxclick
    0xF0: 0x57C03,  # wbr
    0xF2: 0x3B04,  # base
    0xF3: 0x6E306,  # option
    0xF5: 0x41310,  # ondurationchange
    0xF7: 0x8908,  # noframes
    0xF9: 0x40508,  # dropzone
    0xFB: 0x67505,  # scope
    0xFC: 0x8008,  # reversed
    0xFD: 0x3BA0B,  # ondragenter
    0xFE: 0x3FA05,  # start
    0xFF: 0x12F03,  # xmp
    0x100: 0x5F907,  # srclang
    0x101: 0x30703,  # img
    0x104: 0x101,  # b
    0x105: 0x25403,  # for
    0x106: 0x10705,  # aside
    0x107: 0x44907,  # oninput
    0x108: 0x35604,  # area
    0x109: 0x2A40A,  # formmethod
    0x10A: 0x72604,  # wrap
    0x10C: 0x23C02,  # rp
    0x10D: 0x46B0A,  # onkeypress
    0x10E: 0x6802,  # tt
    0x110: 0x34702,  # mi
    0x111: 0x36705,  # muted
    0x112: 0xF303,  # alt
    0x113: 0x5C504,  # code
    0x114: 0x6E02,  # em
    0x115: 0x3C50A,  # ondragexit
    0x117: 0x9F04,  # span
    0x119: 0x6D708,  # manifest
    0x11A: 0x38708,  # menuitem
    0x11B: 0x58B07,  # content
    0x11D: 0x6C109,  # onwaiting
    0x11F: 0x4C609,  # onloadend
    0x121: 0x37E0D,  # oncontextmenu
    0x123: 0x56D06,  # onblur
    0x124: 0x3FC07,  # article
    0x125: 0x9303,  # dir
    0x126: 0xEF04,  # ping
    0x127: 0x24C08,  # required
    0x128: 0x45509,  # oninvalid
    0x129: 0xB105,  # align
    0x12B: 0x58A04,  # icon
    0x12C: 0x64D02,  # h6
    0x12D: 0x1C404,  # cols
    0x12E: 0x22E0A,  # figcaption
    0x12F: 0x45E09,  # onkeydown
    0x130: 0x66B08,  # onsubmit
    0x131: 0x14D09,  # oncanplay
    0x132: 0x70B03,  # sup
    0x133: 0xC01,  # p
    0x135: 0x40A09,  # onemptied
    0x136: 0x39106,  # oncopy
    0x137: 0x19C04,  # cite
    0x138: 0x3A70A,  # ondblclick
    0x13A: 0x50B0B,  # onmousemove
    0x13C: 0x66D03,  # sub
    0x13D: 0x48703,  # rel
    0x13E: 0x5F08,  # optgroup
    0x142: 0x9C07,  # rowspan
    0x143: 0x37806,  # source
    0x144: 0x21608,  # noscript
    0x145: 0x1A304,  # open
    0x146: 0x20403,  # ins
    0x147: 0x2540D,  # foreignObject
    0x148: 0x5AD0A,  # onpopstate
    0x14A: 0x28D07,  # enctype
    0x14B: 0x2760E,  # onautocomplete
    0x14C: 0x35208,  # textarea
    0x14E: 0x2780C,  # autocomplete
    0x14F: 0x15702,  # hr
    0x150: 0x1DE08,  # controls
    0x151: 0x10902,  # id
    0x153: 0x2360C,  # onafterprint
    0x155: 0x2610D,  # foreignobject
    0x156: 0x32707,  # marquee
    0x157: 0x59A07,  # onpause
    0x158: 0x5E602,  # dl
    0x159: 0x5206,  # height
    0x15A: 0x34703,  # min
    0x15B: 0x9307,  # dirname
    0x15C: 0x1F209,  # translate
    0x15D: 0x5604,  # html
    0x15E: 0x34709,  # minlength
    0x15F: 0x48607,  # preload
    0x160: 0x71408,  # template
    0x161: 0x3DF0B,  # ondragleave
    0x162: 0x3A02,  # rb
    0x164: 0x5C003,  # src
    0x165: 0x6DD06,  # strong
    0x167: 0x7804,  # samp
    0x168: 0x6F307,  # address
    0x169: 0x55108,  # ononline
    0x16B: 0x1310B,  # placeholder
    0x16C: 0x2C406,  # target
    0x16D: 0x20605,  # small
    0x16E: 0x6CA07,  # onwheel
    0x16F: 0x1C90A,  # annotation
    0x170: 0x4740A,  # spellcheck
    0x171: 0x7207,  # details
    0x172: 0x10306,  # canvas
    0x173: 0x12109,  # autofocus
    0x174: 0xC05,  # param
    0x176: 0x46308,  # download
    0x177: 0x45203,  # del
    0x178: 0x36C07,  # onclose
    0x179: 0xB903,  # kbd
    0x17A: 0x31906,  # applet
    0x17B: 0x2E004,  # href
    0x17C: 0x5F108,  # onresize
    0x17E: 0x49D0C,  # onloadeddata
    0x180: 0xCC02,  # tr
    0x181: 0x2C00A,  # formtarget
    0x182: 0x11005,  # title
    0x183: 0x6FF05,  # style
    0x184: 0xD206,  # strike
    0x185: 0x59E06,  # usemap
    0x186: 0x2FC06,  # iframe
    0x187: 0x1004,  # main
    0x189: 0x7B07,  # picture
    0x18C: 0x31605,  # ismap
    0x18E: 0x4A504,  # data
    0x18F: 0x5905,  # label
    0x191: 0x3D10E,  # referrerpolicy
    0x192: 0x15602,  # th
    0x194: 0x53606,  # prompt
    0x195: 0x56807,  # section
    0x197: 0x6D107,  # optimum
    0x198: 0x2DB04,  # high
    0x199: 0x15C02,  # h1
    0x19A: 0x65909,  # onstalled
    0x19B: 0x16D03,  # var
    0x19C: 0x4204,  # time
    0x19E: 0x67402,  # ms
    0x19F: 0x33106,  # header
    0x1A0: 0x4DA09,  # onmessage
    0x1A1: 0x1A605,  # nonce
    0x1A2: 0x26E0A,  # formaction
    0x1A3: 0x22006,  # center
    0x1A4: 0x3704,  # nobr
    0x1A5: 0x59505,  # table
    0x1A6: 0x4A907,  # listing
    0x1A7: 0x18106,  # legend
    0x1A9: 0x29B09,  # challenge
    0x1AA: 0x24806,  # figure
    0x1AB: 0xE605,  # media
    0x1AE: 0xD904,  # type
    0x1AF: 0x3F04,  # font
    0x1B0: 0x4DA0E,  # onmessageerror
    0x1B1: 0x37108,  # seamless
    0x1B2: 0x8703,  # dfn
    0x1B3: 0x5C705,  # defer
    0x1B4: 0xC303,  # low
    0x1B5: 0x19A03,  # rtc
    0x1B6: 0x5230B,  # onmouseover
    0x1B7: 0x2B20A,  # novalidate
    0x1B8: 0x71C0A,  # workertype
    0x1BA: 0x3CD07,  # itemref
    0x1BD: 0x1,  # a
    0x1BE: 0x31803,  # map
    0x1BF: 0x400C,  # ontimeupdate
    0x1C0: 0x15E07,  # bgsound
    0x1C1: 0x3206,  # keygen
    0x1C2: 0x2705,  # tbody
    0x1C5: 0x64406,  # onshow
    0x1C7: 0x2501,  # s
    0x1C8: 0x6607,  # pattern
    0x1CC: 0x14D10,  # oncanplaythrough
    0x1CE: 0x2D702,  # dd
    0x1CF: 0x6F906,  # srcset
    0x1D0: 0x17003,  # big
    0x1D2: 0x65108,  # sortable
    0x1D3: 0x48007,  # onkeyup
    0x1D5: 0x5A406,  # onplay
    0x1D7: 0x4B804,  # meta
    0x1D8: 0x40306,  # ondrop
    0x1DA: 0x60008,  # onscroll
    0x1DB: 0x1FB0B,  # crossorigin
    0x1DC: 0x5730A,  # onpageshow
    0x1DD: 0x4,  # abbr
    0x1DE: 0x9202,  # td
    0x1DF: 0x58B0F,  # contenteditable
    0x1E0: 0x27206,  # action
    0x1E1: 0x1400B,  # playsinline
    0x1E2: 0x43107,  # onfocus
    0x1E3: 0x2E008,  # hreflang
    0x1E5: 0x5160A,  # onmouseout
    0x1E6: 0x5EA07,  # onreset
    0x1E7: 0x13C08,  # autoplay
    0x1E8: 0x63109,  # onseeking
    0x1EA: 0x67506,  # scoped
    0x1EC: 0x30A,  # radiogroup
    0x1EE: 0x3800B,  # contextmenu
    0x1EF: 0x52E09,  # onmouseup
    0x1F1: 0x2CA06,  # hgroup
    0x1F2: 0x2080F,  # allowfullscreen
    0x1F3: 0x4BE08,  # tabindex
    0x1F6: 0x30F07,  # isindex
    0x1F7: 0x1A0E,  # accept-charset
    0x1F8: 0x2AE0E,  # formnovalidate
    0x1FB: 0x1C90E,  # annotation-xml
    0x1FC: 0x6E05,  # embed
    0x1FD: 0x21806,  # script
    0x1FE: 0xBB06,  # dialog
    0x1FF: 0x1D707,  # command
}

TABLE: tuple[int, ...] = tuple(_SLOTS.get(i, 0) for i in range(1 << TABLE_BITS))
"""Hash slots; 0 marks an empty slot."""


def _name(code: int) -> str:
    start = code >> 8
    return ATOM_TEXT[start : start + (code & 0xFF)]


def known_atoms() -> dict[str, int]:
    """Return a fresh mapping of every atom name to its code."""
    return {_name(code): code for code in TABLE if code}