"""Fluent icon glyphs with code points from U+E700 up to U+EBFF.

The mapping keeps the glyph names and their private-use code points in
font order. Glyphs from U+EC00 onwards live in the companion table.
"""

__all__ = ["ICONS_A", "FIRST_CODEPOINT", "LAST_CODEPOINT"]

FIRST_CODEPOINT = 0xE700
"""Lowest code point this table may hold."""

LAST_CODEPOINT = 0xEBFF
"""Highest code point this table may hold."""

ICONS_A: dict[str, int] = {
    "GlobalNavButton": 0xe700,
    "Wifi": 0xe701,
    "Bluetooth": 0xe702,
    "Connect": 0xe703,
    "InternetSharing": 0xe704,
    "VPN": 0xe705,
    "Brightness": 0xe706,
    "MapPin": 0xe707,
    "QuietHours": 0xe708,
    "Airplane": 0xe709,
    "Tablet": 0xe70a,
    "QuickNote": 0xe70b,
    "RememberedDevice": 0xe70c,
    "ChevronDown": 0xe70d,
    "ChevronUp": 0xe70e,
    "Edit": 0xe70f,
    "Add": 0xe710,
    "Cancel": 0xe711,
    "More": 0xe712,
    "Settings": 0xe713,
    "Video": 0xe714,
    "Mail": 0xe715,
    "People": 0xe716,
    "Phone": 0xe717,
    "Pin": 0xe718,
    "Shop": 0xe719,
    "Stop": 0xe71a,
    "Link": 0xe71b,
    "Filter": 0xe71c,
    "AllApps": 0xe71d,
    "Zoom": 0xe71e,
    "ZoomOut": 0xe71f,
    "Microphone": 0xe720,
    "Search": 0xe721,
    "Camera": 0xe722,
    "Attach": 0xe723,
    "Send": 0xe724,
    "SendFill": 0xe725,
    "WalkSolid": 0xe726,
    "InPrivate": 0xe727,
    "FavoriteList": 0xe728,
    "PageSolid": 0xe729,
    "Forward": 0xe72a,
    "Back": 0xe72b,
    "Refresh": 0xe72c,
    "Share": 0xe72d,
    "Lock": 0xe72e,
    "ReportHacked": 0xe730,
    "EMI": 0xe731,
    "FavoriteStar": 0xe734,
    "FavoriteStarFill": 0xe735,
    "ReadingMode": 0xe736,
    "Favicon": 0xe737,
    "Remove": 0xe738,
    "Checkbox": 0xe739,
    "CheckboxComposite": 0xe73a,
    "CheckboxFill": 0xe73b,
    "CheckboxIndeterminate": 0xe73c,
    "CheckboxCompositeReversed": 0xe73d,
    "CheckMark": 0xe73e,
    "BackToWindow": 0xe73f,
    "FullScreen": 0xe740,
    "ResizeTouchLarger": 0xe741,
    "ResizeTouchSmaller": 0xe742,
    "ResizeMouseSmall": 0xe743,
    "ResizeMouseMedium": 0xe744,
    "ResizeMouseWide": 0xe745,
    "ResizeMouseTall": 0xe746,
    "ResizeMouseLarge": 0xe747,
    "SwitchUser": 0xe748,
    "Print": 0xe749,
    "Up": 0xe74a,
    "Down": 0xe74b,
    "OEM": 0xe74c,
    "Delete": 0xe74d,
    "Save": 0xe74e,
    "Mute": 0xe74f,
    "BackSpaceQWERTY": 0xe750,
    "ReturnKey": 0xe751,
    "UpArrowShiftKey": 0xe752,
    "Cloud": 0xe753,
    "Flashlight": 0xe754,
    "RotationLock": 0xe755,
    "CommandPrompt": 0xe756,
    "SIPMove": 0xe759,
    "SIPUndock": 0xe75a,
    "SIPRedock": 0xe75b,
    "EraseTool": 0xe75c,
    "UnderscoreSpace": 0xe75d,
    "GripperTool": 0xe75e,
    "Dialpad": 0xe75f,
    "PageLeft": 0xe760,
    "PageRight": 0xe761,
    "MultiSelect": 0xe762,
    "KeyboardLeftHanded": 0xe763,
    "KeyboardRightHanded": 0xe764,
    "KeyboardClassic": 0xe765,
    "KeyboardSplit": 0xe766,
    "Volume": 0xe767,
    "Play": 0xe768,
    "Pause": 0xe769,
    "ChevronLeft": 0xe76b,
    "ChevronRight": 0xe76c,
    "InkingTool": 0xe76d,
    "Emoji2": 0xe76e,
    "GripperBarHorizontal": 0xe76f,
    "System": 0xe770,
    "Personalize": 0xe771,
    "Devices": 0xe772,
    "SearchAndApps": 0xe773,
    "Globe": 0xe774,
    "TimeLanguage": 0xe775,
    "EaseOfAccess": 0xe776,
    "UpdateRestore": 0xe777,
    "HangUp": 0xe778,
    "ContactInfo": 0xe779,
    "Unpin": 0xe77a,
    "Contact": 0xe77b,
    "Memo": 0xe77c,
    "IncomingCall": 0xe77e,
    "Paste": 0xe77f,
    "PhoneBook": 0xe780,
    "LEDLight": 0xe781,
    "Error": 0xe783,
    "GripperBarVertical": 0xe784,
    "Unlock": 0xe785,
    "Slideshow": 0xe786,
    "Calendar": 0xe787,
    "GripperResize": 0xe788,
    "Megaphone": 0xe789,
    "Trim": 0xe78a,
    "NewWindow": 0xe78b,
    "SaveLocal": 0xe78c,
    "Color": 0xe790,
    "DataSense": 0xe791,
    "SaveAs": 0xe792,
    "Light": 0xe793,
    "AspectRatio": 0xe799,
    "DataSenseBar": 0xe7a5,
    "Redo": 0xe7a6,
    "Undo": 0xe7a7,
    "Crop": 0xe7a8,
    "OpenWith": 0xe7ac,
    "Rotate": 0xe7ad,
    "RedEye": 0xe7b3,
    "SetlockScreen": 0xe7b5,
    "MapPin2": 0xe7b7,
    "Package": 0xe7b8,
    "Warning": 0xe7ba,
    "ReadingList": 0xe7bc,
    "Education": 0xe7be,
    "ShoppingCart": 0xe7bf,
    "Train": 0xe7c0,
    "Flag": 0xe7c1,
    "Move": 0xe7c2,
    "Page": 0xe7c3,
    "TaskView": 0xe7c4,
    "BrowsePhotos": 0xe7c5,
    "HalfStarLeft": 0xe7c6,
    "HalfStarRight": 0xe7c7,
    "Record": 0xe7c8,
    "TouchPointer": 0xe7c9,
    "LangJPN": 0xe7de,
    "Ferry": 0xe7e3,
    "Highlight": 0xe7e6,
    "ActionCenterNotification": 0xe7e7,
    "PowerButton": 0xe7e8,
    "ResizeTouchNarrower": 0xe7ea,
    "ResizeTouchShorter": 0xe7eb,
    "DrivingMode": 0xe7ec,
    "RingerSilent": 0xe7ed,
    "OtherUser": 0xe7ee,
    "Admin": 0xe7ef,
    "CC": 0xe7f0,
    "SDCard": 0xe7f1,
    "CallForwarding": 0xe7f2,
    "SettingsDisplaySound": 0xe7f3,
    "TVMonitor": 0xe7f4,
    "Speakers": 0xe7f5,
    "Headphone": 0xe7f6,
    "DeviceLaptopPic": 0xe7f7,
    "DeviceLaptopNoPic": 0xe7f8,
    "DeviceMonitorRightPic": 0xe7f9,
    "DeviceMonitorLeftPic": 0xe7fa,
    "DeviceMonitorNoPic": 0xe7fb,
    "Game": 0xe7fc,
    "HorizontalTabKey": 0xe7fd,
    "StreetsideSplitMinimize": 0xe802,
    "StreetsideSplitExpand": 0xe803,
    "Car": 0xe804,
    "Walk": 0xe805,
    "Bus": 0xe806,
    "TiltUp": 0xe809,
    "TiltDown": 0xe80a,
    "CallControl": 0xe80b,
    "RotateMapRight": 0xe80c,
    "RotateMapLeft": 0xe80d,
    "Home": 0xe80f,
    "ParkingLocation": 0xe811,
    "MapCompassTop": 0xe812,
    "MapCompassBottom": 0xe813,
    "IncidentTriangle": 0xe814,
    "Touch": 0xe815,
    "MapDirections": 0xe816,
    "StartPoint": 0xe819,
    "StopPoint": 0xe81a,
    "EndPoint": 0xe81b,
    "History": 0xe81c,
    "Location": 0xe81d,
    "MapLayers": 0xe81e,
    "Accident": 0xe81f,
    "Work": 0xe821,
    "Construction": 0xe822,
    "Recent": 0xe823,
    "Bank": 0xe825,
    "DownloadMap": 0xe826,
    "InkingToolFill2": 0xe829,
    "HighlightFill2": 0xe82a,
    "EraseToolFill": 0xe82b,
    "EraseToolFill2": 0xe82c,
    "Dictionary": 0xe82d,
    "DictionaryAdd": 0xe82e,
    "ToolTip": 0xe82f,
    "ChromeBack": 0xe830,
    "ProvisioningPackage": 0xe835,
    "AddRemoteDevice": 0xe836,
    "FolderOpen": 0xe838,
    "Ethernet": 0xe839,
    "ShareBroadband": 0xe83a,
    "DirectAccess": 0xe83b,
    "DialUp": 0xe83c,
    "DefenderApp": 0xe83d,
    "BatteryCharging9": 0xe83e,
    "Battery10": 0xe83f,
    "Pinned": 0xe840,
    "PinFill": 0xe841,
    "PinnedFill": 0xe842,
    "PeriodKey": 0xe843,
    "PuncKey": 0xe844,
    "RevToggleKey": 0xe845,
    "RightArrowKeyTime1": 0xe846,
    "RightArrowKeyTime2": 0xe847,
    "LeftQuote": 0xe848,
    "RightQuote": 0xe849,
    "DownShiftKey": 0xe84a,
    "UpShiftKey": 0xe84b,
    "PuncKey0": 0xe84c,
    "PuncKeyLeftBottom": 0xe84d,
    "RightArrowKeyTime3": 0xe84e,
    "RightArrowKeyTime4": 0xe84f,
    "Battery0": 0xe850,
    "Battery1": 0xe851,
    "Battery2": 0xe852,
    "Battery3": 0xe853,
    "Battery4": 0xe854,
    "Battery5": 0xe855,
    "Battery6": 0xe856,
    "Battery7": 0xe857,
    "Battery8": 0xe858,
    "Battery9": 0xe859,
    "BatteryCharging0": 0xe85a,
    "BatteryCharging1": 0xe85b,
    "BatteryCharging2": 0xe85c,
    "BatteryCharging3": 0xe85d,
    "BatteryCharging4": 0xe85e,
    "BatteryCharging5": 0xe85f,
    "BatteryCharging6": 0xe860,
    "BatteryCharging7": 0xe861,
    "BatteryCharging8": 0xe862,
    "BatterySaver0": 0xe863,
    "BatterySaver1": 0xe864,
    "BatterySaver2": 0xe865,
    "BatterySaver3": 0xe866,
    "BatterySaver4": 0xe867,
    "BatterySaver5": 0xe868,
    "BatterySaver6": 0xe869,
    "BatterySaver7": 0xe86a,
    "BatterySaver8": 0xe86b,
    "SignalBars1": 0xe86c,
    "SignalBars2": 0xe86d,
    "SignalBars3": 0xe86e,
    "SignalBars4": 0xe86f,
    "SignalBars5": 0xe870,
    "SignalNotConnected": 0xe871,
    "Wifi1": 0xe872,
    "Wifi2": 0xe873,
    "Wifi3": 0xe874,
    "MobSIMLock": 0xe875,
    "MobSIMMissing": 0xe876,
    "Vibrate": 0xe877,
    "RoamingInternational": 0xe878,
    "RoamingDomestic": 0xe879,
    "CallForwardInternational": 0xe87a,
    "CallForwardRoaming": 0xe87b,
    "JpnRomanji": 0xe87c,
    "JpnRomanjiLock": 0xe87d,
    "JpnRomanjiShift": 0xe87e,
    "JpnRomanjiShiftLock": 0xe87f,
    "StatusDataTransfer": 0xe880,
    "StatusDataTransferVPN": 0xe881,
    "StatusDualSIM2": 0xe882,
    "StatusDualSIM2VPN": 0xe883,
    "StatusDualSIM1": 0xe884,
    "StatusDualSIM1VPN": 0xe885,
    "StatusSGLTE": 0xe886,
    "StatusSGLTECell": 0xe887,
    "StatusSGLTEDataVPN": 0xe888,
    "StatusVPN": 0xe889,
    "WifiHotspot": 0xe88a,
    "LanguageKor": 0xe88b,
    "LanguageCht": 0xe88c,
    "LanguageChs": 0xe88d,
    "USB": 0xe88e,
    "InkingToolFill": 0xe88f,
    "View": 0xe890,
    "HighlightFill": 0xe891,
    "Previous": 0xe892,
    "Next": 0xe893,
    "Clear": 0xe894,
    "Sync": 0xe895,
    "Download": 0xe896,
    "Help": 0xe897,
    "Upload": 0xe898,
    "Emoji": 0xe899,
    "TwoPage": 0xe89a,
    "LeaveChat": 0xe89b,
    "MailForward": 0xe89c,
    "RotateCamera": 0xe89e,
    "ClosePane": 0xe89f,
    "OpenPane": 0xe8a0,
    "PreviewLink": 0xe8a1,
    "AttachCamera": 0xe8a2,
    "ZoomIn": 0xe8a3,
    "Bookmarks": 0xe8a4,
    "Document": 0xe8a5,
    "ProtectedDocument": 0xe8a6,
    "OpenInNewWindow": 0xe8a7,
    "MailFill": 0xe8a8,
    "ViewAll": 0xe8a9,
    "VideoChat": 0xe8aa,
    "Switch": 0xe8ab,
    "Rename": 0xe8ac,
    "Go": 0xe8ad,
    "SurfaceHub": 0xe8ae,
    "Remote": 0xe8af,
    "Click": 0xe8b0,
    "Shuffle": 0xe8b1,
    "Movies": 0xe8b2,
    "SelectAll": 0xe8b3,
    "Orientation": 0xe8b4,
    "Import": 0xe8b5,
    "ImportAll": 0xe8b6,
    "Folder": 0xe8b7,
    "Webcam": 0xe8b8,
    "Picture": 0xe8b9,
    "Caption": 0xe8ba,
    "ChromeClose": 0xe8bb,
    "ShowResults": 0xe8bc,
    "Message": 0xe8bd,
    "Leaf": 0xe8be,
    "CalendarDay": 0xe8bf,
    "CalendarWeek": 0xe8c0,
    "Characters": 0xe8c1,
    "MailReplyAll": 0xe8c2,
    "Read": 0xe8c3,
    "ShowBcc": 0xe8c4,
    "HideBcc": 0xe8c5,
    "Cut": 0xe8c6,
    "PaymentCard": 0xe8c7,
    "Copy": 0xe8c8,
    "Important": 0xe8c9,
    "MailReply": 0xe8ca,
    "Sort": 0xe8cb,
    "MobileTablet": 0xe8cc,
    "DisconnectDrive": 0xe8cd,
    "MapDrive": 0xe8ce,
    "ContactPresence": 0xe8cf,
    "Priority": 0xe8d0,
    "GotoToday": 0xe8d1,
    "Font": 0xe8d2,
    "FontColor": 0xe8d3,
    "Contact2": 0xe8d4,
    "FolderFill": 0xe8d5,
    "Audio": 0xe8d6,
    "Permissions": 0xe8d7,
    "DisableUpdates": 0xe8d8,
    "Unfavorite": 0xe8d9,
    "OpenLocal": 0xe8da,
    "Italic": 0xe8db,
    "Underline": 0xe8dc,
    "Bold": 0xe8dd,
    "MoveToFolder": 0xe8de,
    "LikeDislike": 0xe8df,
    "Dislike": 0xe8e0,
    "Like": 0xe8e1,
    "AlignRight": 0xe8e2,
    "AlignCenter": 0xe8e3,
    "AlignLeft": 0xe8e4,
    "OpenFile": 0xe8e5,
    "ClearSelection": 0xe8e6,
    "FontDecrease": 0xe8e7,
    "FontIncrease": 0xe8e8,
    "FontSize": 0xe8e9,
    "CellPhone": 0xe8ea,
    "Reshare": 0xe8eb,
    "Tag": 0xe8ec,
    "RepeatOne": 0xe8ed,
    "RepeatAll": 0xe8ee,
    "Calculator": 0xe8ef,
    "Directions": 0xe8f0,
    "Library": 0xe8f1,
    "ChatBubbles": 0xe8f2,
    "PostUpdate": 0xe8f3,
    "NewFolder": 0xe8f4,
    "CalendarReply": 0xe8f5,
    "UnsyncFolder": 0xe8f6,
    "SyncFolder": 0xe8f7,
    "BlockContact": 0xe8f8,
    "SwitchApps": 0xe8f9,
    "AddFriend": 0xe8fa,
    "Accept": 0xe8fb,
    "GoToStart": 0xe8fc,
    "BulletedList": 0xe8fd,
    "Scan": 0xe8fe,
    "Preview": 0xe8ff,
    "Group": 0xe902,
    "ZeroBars": 0xe904,
    "OneBar": 0xe905,
    "TwoBars": 0xe906,
    "ThreeBars": 0xe907,
    "FourBars": 0xe908,
    "World": 0xe909,
    "Comment": 0xe90a,
    "MusicInfo": 0xe90b,
    "DockLeft": 0xe90c,
    "DockRight": 0xe90d,
    "DockBottom": 0xe90e,
    "Repair": 0xe90f,
    "Accounts": 0xe910,
    "DullSound": 0xe911,
    "Manage": 0xe912,
    "Street": 0xe913,
    "Printer3D": 0xe914,
    "RadioBullet": 0xe915,
    "Stopwatch": 0xe916,
    "Photo": 0xe91b,
    "ActionCenter": 0xe91c,
    "FullCircleMask": 0xe91f,
    "ChromeMinimize": 0xe921,
    "ChromeMaximize": 0xe922,
    "ChromeRestore": 0xe923,
    "Annotation": 0xe924,
    "BackSpaceQWERTYSm": 0xe925,
    "BackSpaceQWERTYMd": 0xe926,
    "Swipe": 0xe927,
    "Fingerprint": 0xe928,
    "Handwriting": 0xe929,
    "ChromeBackToWindow": 0xe92c,
    "ChromeFullScreen": 0xe92d,
    "KeyboardStandard": 0xe92e,
    "KeyboardDismiss": 0xe92f,
    "Completed": 0xe930,
    "ChromeAnnotate": 0xe931,
    "Label": 0xe932,
    "IBeam": 0xe933,
    "IBeamOutline": 0xe934,
    "FlickDown": 0xe935,
    "FlickUp": 0xe936,
    "FlickLeft": 0xe937,
    "FlickRight": 0xe938,
    "FeedbackApp": 0xe939,
    "MusicAlbum": 0xe93c,
    "Streaming": 0xe93e,
    "Code": 0xe943,
    "ReturnToWindow": 0xe944,
    "LightningBolt": 0xe945,
    "Info": 0xe946,
    "CalculatorMultiply": 0xe947,
    "CalculatorAddition": 0xe948,
    "CalculatorSubtract": 0xe949,
    "CalculatorDivide": 0xe94a,
    "CalculatorSquareroot": 0xe94b,
    "CalculatorPercentage": 0xe94c,
    "CalculatorNegate": 0xe94d,
    "CalculatorEqualTo": 0xe94e,
    "CalculatorBackspace": 0xe94f,
    "Component": 0xe950,
    "DMC": 0xe951,
    "Dock": 0xe952,
    "MultimediaDMS": 0xe953,
    "MultimediaDVR": 0xe954,
    "MultimediaPMP": 0xe955,
    "PrintfaxPrinterFile": 0xe956,
    "Sensor": 0xe957,
    "StorageOptical": 0xe958,
    "Communications": 0xe95a,
    "Headset": 0xe95b,
    "Projector": 0xe95d,
    "Health": 0xe95e,
    "Wire": 0xe95f,
    "Webcam2": 0xe960,
    "Input": 0xe961,
    "Mouse": 0xe962,
    "Smartcard": 0xe963,
    "SmartcardVirtual": 0xe964,
    "MediaStorageTower": 0xe965,
    "ReturnKeySm": 0xe966,
    "GameConsole": 0xe967,
    "Network": 0xe968,
    "StorageNetworkWireless": 0xe969,
    "StorageTape": 0xe96a,
    "ChevronUpSmall": 0xe96d,
    "ChevronDownSmall": 0xe96e,
    "ChevronLeftSmall": 0xe96f,
    "ChevronRightSmall": 0xe970,
    "ChevronUpMed": 0xe971,
    "ChevronDownMed": 0xe972,
    "ChevronLeftMed": 0xe973,
    "ChevronRightMed": 0xe974,
    "Devices2": 0xe975,
    "ExpandTile": 0xe976,
    "PC1": 0xe977,
    "PresenceChicklet": 0xe978,
    "PresenceChickletVideo": 0xe979,
    "Reply": 0xe97a,
    "SetTile": 0xe97b,
    "Type": 0xe97c,
    "Korean": 0xe97d,
    "HalfAlpha": 0xe97e,
    "FullAlpha": 0xe97f,
    "Key12On": 0xe980,
    "ChineseChangjie": 0xe981,
    "QWERTYOn": 0xe982,
    "QWERTYOff": 0xe983,
    "ChineseQuick": 0xe984,
    "Japanese": 0xe985,
    "FullHiragana": 0xe986,
    "FullKatakana": 0xe987,
    "HalfKatakana": 0xe988,
    "ChineseBoPoMoFo": 0xe989,
    "ChinesePinyin": 0xe98a,
    "ConstructionCone": 0xe98f,
    "XboxOneConsole": 0xe990,
    "Volume0": 0xe992,
    "Volume1": 0xe993,
    "Volume2": 0xe994,
    "Volume3": 0xe995,
    "BatteryUnknown": 0xe996,
    "WifiAttentionOverlay": 0xe998,
    "Robot": 0xe99a,
    "TapAndSend": 0xe9a1,
    "FitPage": 0xe9a6,
    "PasswordKeyShow": 0xe9a8,
    "PasswordKeyHide": 0xe9a9,
    "BidiLtr": 0xe9aa,
    "BidiRtl": 0xe9ab,
    "ForwardSm": 0xe9ac,
    "CommaKey": 0xe9ad,
    "DashKey": 0xe9ae,
    "DullSoundKey": 0xe9af,
    "HalfDullSound": 0xe9b0,
    "RightDoubleQuote": 0xe9b1,
    "LeftDoubleQuote": 0xe9b2,
    "PuncKeyRightBottom": 0xe9b3,
    "PuncKey1": 0xe9b4,
    "PuncKey2": 0xe9b5,
    "PuncKey3": 0xe9b6,
    "PuncKey4": 0xe9b7,
    "PuncKey5": 0xe9b8,
    "PuncKey6": 0xe9b9,
    "PuncKey9": 0xe9ba,
    "PuncKey7": 0xe9bb,
    "PuncKey8": 0xe9bc,
    "Frigid": 0xe9ca,
    "Unknown": 0xe9ce,
    "AreaChart": 0xe9d2,
    "CheckList": 0xe9d5,
    "Diagnostic": 0xe9d9,
    "Equalizer": 0xe9e9,
    "Process": 0xe9f3,
    "Processing": 0xe9f5,
    "ReportDocument": 0xe9f9,
    "VideoSolid": 0xea0c,
    "MixedMediaBadge": 0xea0d,
    "DisconnectDisplay": 0xea14,
    "Shield": 0xea18,
    "Info2": 0xea1f,
    "ActionCenterAsterisk": 0xea21,
    "Beta": 0xea24,
    "SaveCopy": 0xea35,
    "List": 0xea37,
    "Asterisk": 0xea38,
    "ErrorBadge": 0xea39,
    "CircleRing": 0xea3a,
    "CircleFill": 0xea3b,
    "MergeCall": 0xea3c,
    "PrivateCall": 0xea3d,
    "Record2": 0xea3f,
    "AllAppsMirrored": 0xea40,
    "BookmarksMirrored": 0xea41,
    "BulletedListMirrored": 0xea42,
    "CallForwardInternationalMirrored": 0xea43,
    "CallForwardRoamingMirrored": 0xea44,
    "ChromeBackMirrored": 0xea47,
    "ClearSelectionMirrored": 0xea48,
    "ClosePaneMirrored": 0xea49,
    "ContactInfoMirrored": 0xea4a,
    "DockRightMirrored": 0xea4b,
    "DockLeftMirrored": 0xea4c,
    "ExpandTileMirrored": 0xea4e,
    "GoMirrored": 0xea4f,
    "GripperResizeMirrored": 0xea50,
    "HelpMirrored": 0xea51,
    "ImportMirrored": 0xea52,
    "ImportAllMirrored": 0xea53,
    "LeaveChatMirrored": 0xea54,
    "ListMirrored": 0xea55,
    "MailForwardMirrored": 0xea56,
    "MailReplyMirrored": 0xea57,
    "MailReplyAllMirrored": 0xea58,
    "OpenPaneMirrored": 0xea5b,
    "OpenWithMirrored": 0xea5c,
    "ParkingLocationMirrored": 0xea5e,
    "ResizeMouseMediumMirrored": 0xea5f,
    "ResizeMouseSmallMirrored": 0xea60,
    "ResizeMouseTallMirrored": 0xea61,
    "ResizeTouchNarrowerMirrored": 0xea62,
    "SendMirrored": 0xea63,
    "SendFillMirrored": 0xea64,
    "ShowResultsMirrored": 0xea65,
    "Media": 0xea69,
    "SyncError": 0xea6a,
    "Devices3": 0xea6c,
    "SlowMotionOn": 0xea79,
    "Lightbulb": 0xea80,
    "StatusCircle": 0xea81,
    "StatusTriangle": 0xea82,
    "StatusError": 0xea83,
    "StatusWarning": 0xea84,
    "Puzzle": 0xea86,
    "CalendarSolid": 0xea89,
    "HomeSolid": 0xea8a,
    "ParkingLocationSolid": 0xea8b,
    "ContactSolid": 0xea8c,
    "ConstructionSolid": 0xea8d,
    "AccidentSolid": 0xea8e,
    "Ringer": 0xea8f,
    "PDF": 0xea90,
    "ThoughtBubble": 0xea91,
    "HeartBroken": 0xea92,
    "BatteryCharging10": 0xea93,
    "BatterySaver9": 0xea94,
    "BatterySaver10": 0xea95,
    "CallForwardingMirrored": 0xea97,
    "MultiSelectMirrored": 0xea98,
    "Broom": 0xea99,
    "ForwardCall": 0xeac2,
    "Trackers": 0xeadf,
    "Market": 0xeafc,
    "PieSingle": 0xeb05,
    "StockUp": 0xeb0f,
    "StockDown": 0xeb11,
    "Design": 0xeb3c,
    "Website": 0xeb41,
    "Drop": 0xeb42,
    "Radar": 0xeb44,
    "BusSolid": 0xeb47,
    "FerrySolid": 0xeb48,
    "StartPointSolid": 0xeb49,
    "StopPointSolid": 0xeb4a,
    "EndPointSolid": 0xeb4b,
    "AirplaneSolid": 0xeb4c,
    "TrainSolid": 0xeb4d,
    "WorkSolid": 0xeb4e,
    "ReminderFill": 0xeb4f,
    "Reminder": 0xeb50,
    "Heart": 0xeb51,
    "HeartFill": 0xeb52,
    "EthernetError": 0xeb55,
    "EthernetWarning": 0xeb56,
    "StatusConnecting1": 0xeb57,
    "StatusConnecting2": 0xeb58,
    "StatusUnsecure": 0xeb59,
    "WifiError0": 0xeb5a,
    "WifiError1": 0xeb5b,
    "WifiError2": 0xeb5c,
    "WifiError3": 0xeb5d,
    "WifiError4": 0xeb5e,
    "WifiWarning0": 0xeb5f,
    "WifiWarning1": 0xeb60,
    "WifiWarning2": 0xeb61,
    "WifiWarning3": 0xeb62,
    "WifiWarning4": 0xeb63,
    "Devices4": 0xeb66,
    "NUIIris": 0xeb67,
    "NUIFace": 0xeb68,
    "GatewayRouter": 0xeb77,
    "EditMirrored": 0xeb7e,
    "NUIFPStartSlideHand": 0xeb82,
    "NUIFPStartSlideAction": 0xeb83,
    "NUIFPContinueSlideHand": 0xeb84,
    "NUIFPContinueSlideAction": 0xeb85,
    "NUIFPRollRightHand": 0xeb86,
    "NUIFPRollRightHandAction": 0xeb87,
    "NUIFPRollLeftHand": 0xeb88,
    "NUIFPRollLeftAction": 0xeb89,
    "NUIFPPressHand": 0xeb8a,
    "NUIFPPressAction": 0xeb8b,
    "NUIFPPressRepeatHand": 0xeb8c,
    "NUIFPPressRepeatAction": 0xeb8d,
    "StatusErrorFull": 0xeb90,
    "TaskViewExpanded": 0xeb91,
    "Certificate": 0xeb95,
    "BackSpaceQWERTYLg": 0xeb96,
    "ReturnKeyLg": 0xeb97,
    "FastForward": 0xeb9d,
    "Rewind": 0xeb9e,
    "Photo2": 0xeb9f,
    "MobBattery0": 0xeba0,
    "MobBattery1": 0xeba1,
    "MobBattery2": 0xeba2,
    "MobBattery3": 0xeba3,
    "MobBattery4": 0xeba4,
    "MobBattery5": 0xeba5,
    "MobBattery6": 0xeba6,
    "MobBattery7": 0xeba7,
    "MobBattery8": 0xeba8,
    "MobBattery9": 0xeba9,
    "MobBattery10": 0xebaa,
    "MobBatteryCharging0": 0xebab,
    "MobBatteryCharging1": 0xebac,
    "MobBatteryCharging2": 0xebad,
    "MobBatteryCharging3": 0xebae,
    "MobBatteryCharging4": 0xebaf,
    "MobBatteryCharging5": 0xebb0,
    "MobBatteryCharging6": 0xebb1,
    "MobBatteryCharging7": 0xebb2,
    "MobBatteryCharging8": 0xebb3,
    "MobBatteryCharging9": 0xebb4,
    "MobBatteryCharging10": 0xebb5,
    "MobBatterySaver0": 0xebb6,
    "MobBatterySaver1": 0xebb7,
    "MobBatterySaver2": 0xebb8,
    "MobBatterySaver3": 0xebb9,
    "MobBatterySaver4": 0xebba,
    "MobBatterySaver5": 0xebbb,
    "MobBatterySaver6": 0xebbc,
    "MobBatterySaver7": 0xebbd,
    "MobBatterySaver8": 0xebbe,
    "MobBatterySaver9": 0xebbf,
    "MobBatterySaver10": 0xebc0,
    "DictionaryCloud": 0xebc3,
    "ResetDrive": 0xebc4,
    "VolumeBars": 0xebc5,
    "Project": 0xebc6,
    "AdjustHologram": 0xebd2,
    "CloudDownload": 0xebd3,
    "MobWifiCallBars": 0xebd4,
    "MobWifiCall0": 0xebd5,
    "MobWifiCall1": 0xebd6,
    "MobWifiCall2": 0xebd7,
    "MobWifiCall3": 0xebd8,
    "MobWifiCall4": 0xebd9,
    "Family": 0xebda,
    "LockFeedback": 0xebdb,
    "DeviceDiscovery": 0xebde,
    "WindDirection": 0xebe6,
    "RightArrowKeyTime0": 0xebe7,
    "Bug": 0xebe8,
    "TabletMode": 0xebfc,
    "StatusCircleLeft": 0xebfd,
    "StatusTriangleLeft": 0xebfe,
    "StatusErrorLeft": 0xebff,
}