"""Word lists for name generation."""

from typing import Dict, List

from .attributes import Race
from .missions import MissionType

AGENT_FIRST_NAMES: Dict[Race, List[str]] = {
    Race.HUMAN: ["Marcus", "Elena", "Thomas", "Sarah", "William", "Anna", "James", "Maria", "Robert", "Catherine"],
    Race.ELF: ["Aelindra", "Thalion", "Elowen", "Caelum", "Sylvara", "Fenris", "Liriel", "Aerith", "Valen", "Nimue"],
    Race.DWARF: ["Thorin", "Brunhilda", "Grimnar", "Helga", "Dwalin", "Thora", "Balin", "Sigrid", "Gorin", "Astrid"],
    Race.HALFLING: ["Pippin", "Rosie", "Merry", "Lily", "Frodo", "Daisy", "Sam", "Poppy", "Bilbo", "Petunia"],
    Race.HALF_ORC: ["Grok", "Shara", "Thrak", "Urzul", "Korg", "Baggi", "Dench", "Yevelda", "Krusk", "Neega"],
    Race.TIEFLING: ["Malachai", "Lilith", "Mordecai", "Seraphina", "Damien", "Ravenna", "Asmodeus", "Jezebel", "Zagan", "Nemeia"],
    Race.DRAGONBORN: ["Kriv", "Biri", "Medrash", "Kava", "Shedinn", "Mishann", "Torinn", "Harann", "Arjhan", "Jheri"],
}

AGENT_LAST_NAMES: Dict[Race, List[str]] = {
    Race.HUMAN: ["Smith", "Blackwood", "Rivers", "Stone", "Hart", "Vale", "Cross", "Shaw", "Ward", "Cole"],
    Race.ELF: ["Starweaver", "Moonwhisper", "Dawnstrider", "Silverleaf", "Nightwind", "Sunshadow", "Mistwalker", "Thornwood", "Brightblade", "Starfall"],
    Race.DWARF: ["Ironforge", "Stonehammer", "Battleborn", "Deepdelver", "Goldvein", "Firebeard", "Mountainheart", "Steelgrip", "Boulderback", "Craghelm"],
    Race.HALFLING: ["Goodbarrel", "Tealeaf", "Underbough", "Thorngage", "Bramblefoot", "Highhill", "Greenbottle", "Proudfoot", "Burrows", "Took"],
    Race.HALF_ORC: ["Skullcrusher", "Bonegnawer", "Ironhide", "Bloodfist", "Doomhammer", "Gorefang", "Wartooth", "Grimjaw", "Stonefist", "Axebiter"],
    Race.TIEFLING: ["Shadowmend", "Hellfire", "Darkbloom", "Crimsonveil", "Ashborn", "Nightflame", "Duskwalker", "Soulrender", "Voidtouched", "Demonbane"],
    Race.DRAGONBORN: ["Clethtinthiallor", "Daardendrian", "Delmirev", "Drachedandion", "Fenkenkabradon", "Kepeshkmolik", "Kerrhylon", "Kimbatuul", "Linxakasendalor", "Myastan"],
}

STAFF_FIRST_NAMES: List[str] = [
    "Aldric", "Beatrix", "Conrad", "Diana", "Edmund", "Fiona",
    "Gerald", "Helena", "Ivan", "Julia", "Klaus", "Lydia",
    "Magnus", "Nora", "Otto", "Petra", "Quentin", "Rosa",
]

STAFF_LAST_NAMES: List[str] = [
    "Ashford", "Blackwell", "Crawford", "Dunmore", "Everhart",
    "Fletcher", "Grimshaw", "Holloway", "Ironside", "Jarvis",
    "Kincaid", "Langley", "Montague", "Northwood", "Oakley",
]

PATRON_FIRST_NAMES: List[str] = STAFF_FIRST_NAMES + [
    "Sebastian", "Thea", "Ulrich", "Victoria", "Wilhelm", "Zara",
]

PATRON_LAST_NAMES: List[str] = [
    "Ashworth", "Blackstone", "Cromwell", "Darkwood", "Elderwood",
    "Fairweather", "Goldwyn", "Highcastle", "Ironforge", "Kingsley",
    "Lightfoot", "Moorewood", "Northcott", "Oakenshield", "Proudfoot",
]

MISSION_NAME_PREFIXES: Dict[MissionType, List[str]] = {
    MissionType.COMBAT: ["Hunt the", "Slay the", "Destroy the", "Defeat the", "Conquer the"],
    MissionType.EXPLORATION: ["Explore the", "Map the", "Venture into", "Discover the", "Delve into"],
    MissionType.RETRIEVAL: ["Retrieve the", "Recover the", "Find the", "Reclaim the", "Secure the"],
    MissionType.INVESTIGATION: ["Investigate the", "Uncover the", "Solve the", "Research the"],
    MissionType.ESCORT: ["Escort the", "Protect the", "Guard the", "Accompany the"],
    MissionType.DEFENSE: ["Defend the", "Protect the", "Hold the", "Guard the"],
    MissionType.SOCIAL: ["Negotiate with", "Persuade the", "Infiltrate the", "Befriend the"],
    MissionType.RITUAL: ["Disrupt the", "Complete the", "Stop the", "Perform the"],
    MissionType.SIEGE: ["Assault the", "Storm the", "Breach the", "Capture the"],
    MissionType.ASSASSINATION: ["Eliminate the", "Hunt down the", "Track the", "Neutralize the"],
}

MISSION_NAME_SUFFIXES: Dict[MissionType, List[str]] = {
    MissionType.COMBAT: ["Dragon", "Bandit King", "Orc Warband", "Giant Spider Nest", "Werewolf Pack", "Undead Horde"],
    MissionType.EXPLORATION: ["Forgotten Ruins", "Ancient Tomb", "Mysterious Cave", "Lost Temple", "Hidden Valley"],
    MissionType.RETRIEVAL: ["Sacred Relic", "Stolen Artifact", "Lost Crown", "Ancient Scroll", "Royal Heirloom"],
    MissionType.INVESTIGATION: ["Murder Mystery", "Disappearances", "Cult Activities", "Smuggling Ring"],
    MissionType.ESCORT: ["Merchant Caravan", "Noble Family", "Diplomatic Envoy", "Sacred Pilgrims"],
    MissionType.DEFENSE: ["Village", "Outpost", "Bridge", "Supply Depot", "Sacred Shrine"],
    MissionType.SOCIAL: ["Rival Guild", "Merchant Prince", "Noble Council", "Thieves Guild"],
    MissionType.RITUAL: ["Dark Summoning", "Blood Moon Rite", "Ancient Binding", "Resurrection Spell"],
    MissionType.SIEGE: ["Bandit Fortress", "Enemy Stronghold", "Dark Tower", "Mountain Keep"],
    MissionType.ASSASSINATION: ["Crime Lord", "Corrupt Official", "Cult Leader", "Rival Champion"],
}
